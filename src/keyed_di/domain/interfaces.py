from abc import ABC, abstractmethod
from typing import Any, Optional


class IContainer(ABC):
    """Abstract interface for identifier-keyed container operations."""

    @abstractmethod
    def get(self, identifier: str) -> Any:
        """Resolve and return the entry stored under an identifier.

        Args:
            identifier: The identifier to resolve.
        """

    @abstractmethod
    def has(self, identifier: str) -> bool:
        """Report whether an identifier can be resolved, without building anything.

        Args:
            identifier: The identifier to look up.
        """

    @abstractmethod
    def set(self, identifier: str, value: Any) -> None:
        """Store a value or a definition under an identifier.

        Args:
            identifier: The identifier to store under.
            value: A ready value, or an ``IDefinition`` to build lazily.
        """

    @abstractmethod
    def delete(self, identifier: str) -> None:
        """Remove whatever is stored under an identifier.

        Args:
            identifier: The identifier to remove.
        """


class IInstanceAction(ABC):
    """Abstract interface for a post-construction step applied to a built object."""

    @abstractmethod
    def __call__(self, obj: Any, container: IContainer) -> Any:
        """Apply the action and return the same object.

        Args:
            obj: The freshly built object.
            container: The container used to resolve the action's parameters.
        """


class IDefinition(ABC):
    """Abstract interface for a deferred recipe producing a container entry."""

    @abstractmethod
    def build(self, container: IContainer) -> Any:
        """Produce the entry value, resolving dependencies against the container.

        Args:
            container: The container to resolve parameter entries from.
        """

    @abstractmethod
    def is_registered(self) -> bool:
        """Whether the container should cache the built value."""

    @abstractmethod
    def method(self, name: str, parameters: Any = None) -> "IDefinition":
        """Queue a method call on the built object.

        Args:
            name: Name of the method to call.
            parameters: Positional list or keyword mapping of arguments.
        """

    @abstractmethod
    def property(self, name: str, value: Any = None) -> "IDefinition":
        """Queue a property assignment on the built object.

        Args:
            name: Name of the attribute to set.
            value: Value to assign.
        """


class ICacheAdapter(ABC):
    """Abstract interface for the key-value store a container can persist into."""

    @abstractmethod
    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Return the value stored under key, or default."""

    @abstractmethod
    def set(self, key: str, value: Any) -> bool:
        """Store a value under key. Returns whether the write succeeded."""

    @abstractmethod
    def has(self, key: str) -> bool:
        """Whether a value is stored under key."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove the value stored under key. Returns whether the delete succeeded."""
