"""Application layer - Circular dependency detection."""

import threading

from keyed_di.domain import ResolutionContext


class CircularDependencyDetector:
    """Detects circular dependencies while a container builds definitions.

    Uses thread-local storage to track the identifiers currently being built.
    When an identifier appears twice in the stack, a circular dependency is detected.

    Attributes:
        _local: Thread-local storage for resolution contexts.
    """

    def __init__(self) -> None:
        """Initialize the circular dependency detector with thread-local storage."""
        self._local = threading.local()

    def _get_context(self) -> ResolutionContext:
        """Get the current thread's resolution context.

        Returns:
            The resolution context for the current thread.
        """
        if not hasattr(self._local, "context"):
            self._local.context = ResolutionContext()
        return self._local.context

    def push(self, identifier: str) -> None:
        """Add an identifier to the resolution stack.

        Args:
            identifier: The identifier being built.

        Raises:
            CircularDependencyError: If the identifier is already in the stack.

        Example:
            >>> detector = CircularDependencyDetector()
            >>> detector.push("service.a")
            >>> detector.push("service.b")
            >>> detector.push("service.a")  # Raises CircularDependencyError
        """
        self._get_context().push(identifier)

    def pop(self) -> None:
        """Remove the last identifier from the resolution stack.

        Called once the build of that identifier has finished, successfully or not.
        """
        self._get_context().pop()

    def clear(self) -> None:
        """Clear the entire resolution stack."""
        if hasattr(self._local, "context"):
            self._local.context.clear()
