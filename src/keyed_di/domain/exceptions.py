from typing import List, Optional


class DIException(Exception):
    """Base exception for container-related errors."""


class NotFoundError(DIException):
    """Raised when an identifier cannot be resolved anywhere in the container chain.

    Attributes:
        identifier: The identifier that could not be found.
    """

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"No entry found for identifier: {identifier!r}")


class InvalidArgumentError(DIException):
    """Raised when caller-supplied input violates a precondition.

    This occurs when:
    - An identifier or cache key is empty or not a string.
    - A non-definition value is passed where a definition is required.
    - A factory target is not something that can be invoked.
    """


class ConfigurationError(DIException):
    """Raised when a definition references something structurally invalid.

    This occurs when:
    - An object definition names a class that cannot be imported.
    - An instance action targets a method or property the object lacks.
    - A cache entry does not have the shape of a cache adapter.
    """


class ContainerRuntimeError(DIException):
    """Raised when a build step fails while it is being executed.

    The original exception is always chained as ``__cause__``.

    Attributes:
        identifier: The container identifier being resolved, if known.
    """

    def __init__(self, message: str, identifier: Optional[str] = None) -> None:
        self.identifier = identifier
        super().__init__(message)


class UnexpectedValueError(DIException):
    """Raised when a value from an external source has the wrong shape."""


class CircularDependencyError(DIException):
    """Raised when a definition depends on itself, directly or transitively.

    Attributes:
        dependency_chain: Identifiers involved in the cycle, first and last equal.
    """

    def __init__(self, dependency_chain: List[str]) -> None:
        self.dependency_chain = dependency_chain
        message = f"Circular dependency detected: {' -> '.join(dependency_chain)}"
        super().__init__(message)
