import logging
import weakref
from typing import Any, Dict, List, Mapping, Optional, Set

from keyed_di.application.circular_detector import CircularDependencyDetector
from keyed_di.domain import (
    CircularDependencyError,
    ConfigurationError,
    ContainerRuntimeError,
    Entry,
    ICacheAdapter,
    IContainer,
    IDefinition,
    InvalidArgumentError,
    NotFoundError,
    UnexpectedValueError,
)

DEFAULT_SELF_ID = "container"
DEFAULT_CACHE_KEY = "keyed_di.registry"


class Container(IContainer):
    """Identifier-keyed dependency injection container.

    Entries are either ready values, held in the registry, or definitions that
    are built on first access. A registered definition is built once and its
    result moves into the registry; an unregistered one is rebuilt on every
    ``get``. The container always holds itself under its self identifier.

    Containers can be chained. A container with children looks up its own
    entries first and then asks each child in order. Each child delegates the
    resolution of its definitions' parameters to its parent, so a child's
    definitions can reference entries held anywhere in the tree.

    With a cache adapter attached, values stored through ``set`` are mirrored
    into the adapter and loaded back by the next container using it. Objects
    built from definitions are never persisted; they are rebuilt instead.

    Attributes:
        _registry: Resolved entries, including the self entry.
        _definitions: Definitions not yet resolved (or never cached).
        _children: Child containers, searched in order after self.
        _delegate_ref: Weak reference to the container resolving parameters, if not self.
        _circular_detector: Component detecting circular definitions.
        _stored: Identifiers holding values stored directly, the only entries persisted.
        _cache: Optional adapter the stored values are mirrored into.
        _cache_key: Adapter key holding the snapshot of stored values.
        _logger: Logger receiving debug records.
    """

    def __init__(
        self,
        definitions: Optional[Mapping[str, IDefinition]] = None,
        self_id: str = DEFAULT_SELF_ID,
        cache: Optional[Any] = None,
        cache_key: str = DEFAULT_CACHE_KEY,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the container, register it under self_id and load any cached entries.

        Args:
            definitions: Definitions to seed the container with, keyed by identifier.
            self_id: Identifier the container registers itself under.
            cache: A cache adapter, or an ``Entry`` naming a seeded entry resolving to one.
            cache_key: Adapter key the snapshot of stored values is kept under.
            logger: Logger to use instead of the module logger.

        Raises:
            InvalidArgumentError: If self_id or cache_key is empty, or a seeded value is not a definition.
            ConfigurationError: If cache does not have the shape of a cache adapter.
            ContainerRuntimeError: If reading the snapshot from the adapter fails.
            UnexpectedValueError: If the stored snapshot is not a dict.
        """
        _validate_identifier(self_id)
        if not isinstance(cache_key, str) or not cache_key:
            raise InvalidArgumentError("Cache key must be a non-empty string")

        self._registry: Dict[str, Any] = {self_id: self}
        self._definitions: Dict[str, IDefinition] = {}
        self._stored: Set[str] = set()
        self._children: List["Container"] = []
        self._delegate_ref: Optional[weakref.ReferenceType] = None
        self._circular_detector = CircularDependencyDetector()
        self._cache: Optional[ICacheAdapter] = None
        self._cache_key = cache_key
        self._self_id = self_id
        self._logger = logger or logging.getLogger(__name__)

        for identifier, definition in (definitions or {}).items():
            if not isinstance(definition, IDefinition):
                raise InvalidArgumentError(f"Value for {identifier!r} is not a definition: {definition!r}")
            self.set(identifier, definition)

        if cache is not None:
            self._attach_cache(cache)

    @property
    def self_id(self) -> str:
        """Identifier the container is registered under in its own registry."""
        return self._self_id

    @property
    def children(self) -> List["Container"]:
        """Copy of the child containers, in lookup order."""
        return list(self._children)

    @property
    def delegate(self) -> "Container":
        """Container used to resolve definition parameters; self unless linked."""
        if self._delegate_ref is not None:
            delegate = self._delegate_ref()
            if delegate is not None:
                return delegate
        return self

    def set_logger(self, logger: logging.Logger) -> None:
        """Replace the logger receiving this container's debug records."""
        self._logger = logger

    def get(self, identifier: str) -> Any:
        """Resolve and return the entry stored under identifier.

        Own entries always win over children. Definitions are built on first
        access and cached when registered.

        Args:
            identifier: The identifier to resolve.

        Returns:
            The resolved entry.

        Raises:
            InvalidArgumentError: If identifier is empty or not a string.
            NotFoundError: If no container in the chain holds identifier.
            ContainerRuntimeError: If building the entry or one of its dependencies fails.
            ConfigurationError: If an instance action targets a missing method or property.
            CircularDependencyError: If the entry depends on itself.

        Example:
            >>> container.set("greeting", "hello")
            >>> container.get("greeting")
            'hello'
        """
        _validate_identifier(identifier)
        if not self._children:
            return self._self_get(identifier)

        if self._self_has(identifier):
            return self._self_get(identifier)
        for child in self._children:
            if child.has(identifier):
                return child.get(identifier)
        raise NotFoundError(identifier)

    def has(self, identifier: str) -> bool:
        """Report whether identifier resolves here or in a child. Never builds anything.

        Raises:
            InvalidArgumentError: If identifier is empty or not a string.
        """
        _validate_identifier(identifier)
        if self._self_has(identifier):
            return True
        return any(child.has(identifier) for child in self._children)

    def set(self, identifier: str, value: Any) -> None:
        """Store a ready value or a definition under identifier, replacing any previous entry.

        When a cache adapter is attached, the snapshot is written before the
        container changes, so a failed write leaves the container untouched.

        Args:
            identifier: The identifier to store under.
            value: A definition, built lazily on first ``get``, or any other value, stored as is.

        Raises:
            InvalidArgumentError: If identifier is empty or not a string.
            ContainerRuntimeError: If the cache adapter fails to store the snapshot.
        """
        _validate_identifier(identifier)
        is_definition = isinstance(value, IDefinition)
        if not is_definition or identifier in self._stored:
            snapshot = self._snapshot()
            snapshot.pop(identifier, None)
            if not is_definition and identifier != self._self_id:
                snapshot[identifier] = value
            self._write_snapshot(snapshot)

        self._remove(identifier)
        if is_definition:
            self._definitions[identifier] = value
            self._logger.debug("Defined %r as %s", identifier, type(value).__name__)
        else:
            self._registry[identifier] = value
            self._stored.add(identifier)
            self._logger.debug("Set %r", identifier)

    def delete(self, identifier: str) -> None:
        """Remove whatever is stored under identifier. Missing identifiers are ignored.

        Raises:
            InvalidArgumentError: If identifier is empty or not a string.
            ContainerRuntimeError: If the cache adapter fails to store the snapshot.
        """
        _validate_identifier(identifier)
        if identifier in self._stored:
            snapshot = self._snapshot()
            snapshot.pop(identifier, None)
            self._write_snapshot(snapshot)
        self._remove(identifier)
        self._logger.debug("Deleted %r", identifier)

    def add_child(self, child: "Container") -> None:
        """Append a child container and make this container its delegate.

        Raises:
            InvalidArgumentError: If child is not a container, is this container,
                or already has this container in its subtree.
        """
        self._link_child(child, prepend=False)

    def prepend_child(self, child: "Container") -> None:
        """Insert a child container first in lookup order and make this container its delegate.

        Raises:
            InvalidArgumentError: Same conditions as ``add_child``.
        """
        self._link_child(child, prepend=True)

    def set_delegate(self, delegate: "Container") -> None:
        """Resolve definition parameters through delegate, and become its child.

        Passing this container itself resets parameter resolution to self.

        Raises:
            InvalidArgumentError: If delegate is not a container or is part of this container's subtree.
        """
        if not isinstance(delegate, Container):
            raise InvalidArgumentError(f"Delegate must be a Container, got {type(delegate).__name__}")
        if delegate is self:
            self._delegate_ref = None
            return
        if self._contains(delegate):
            raise InvalidArgumentError("Delegate is already a descendant of this container")

        self._delegate_ref = weakref.ref(delegate)
        self._logger.debug("Container %r delegates to %r", self._self_id, delegate.self_id)
        if not delegate._is_child(self):
            delegate.add_child(self)

    def set_self_id(self, identifier: str) -> None:
        """Move the self entry to a new identifier.

        Raises:
            InvalidArgumentError: If identifier is empty or not a string.
            ContainerRuntimeError: If the cache adapter fails to store the snapshot.
        """
        _validate_identifier(identifier)
        if identifier in self._stored or self._self_id in self._stored:
            self._write_snapshot(
                {key: entry for key, entry in self._registry.items() if key in self._stored and key != identifier}
            )
        if self._registry.get(self._self_id) is self:
            del self._registry[self._self_id]
        self._remove(identifier)
        self._self_id = identifier
        self._registry[identifier] = self

    def clear_cache(self) -> bool:
        """Delete the persisted snapshot of stored values.

        Returns:
            False if no cache adapter is attached, True once the snapshot is deleted.

        Raises:
            ContainerRuntimeError: If the adapter reports it could not delete the snapshot.
        """
        if self._cache is None:
            return False
        if not self._cache.delete(self._cache_key):
            raise ContainerRuntimeError(f"Cache adapter could not delete key {self._cache_key!r}")
        self._logger.debug("Cleared cache key %r", self._cache_key)
        return True

    def get_registry_copy(self) -> Dict[str, Any]:
        """Get a copy of the resolved entries, without the self entry."""
        return {key: entry for key, entry in self._registry.items() if key != self._self_id}

    def get_definitions_copy(self) -> Dict[str, IDefinition]:
        """Get a copy of the pending definitions."""
        return self._definitions.copy()

    def __getitem__(self, identifier: str) -> Any:
        return self.get(identifier)

    def __setitem__(self, identifier: str, value: Any) -> None:
        self.set(identifier, value)

    def __delitem__(self, identifier: str) -> None:
        self.delete(identifier)

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str) or not identifier:
            return False
        return self.has(identifier)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._self_id!r}>"

    def _self_has(self, identifier: str) -> bool:
        return identifier in self._registry or identifier in self._definitions

    def _self_get(self, identifier: str) -> Any:
        """Resolve identifier from this container only, building its definition if needed."""
        if identifier in self._registry:
            return self._registry[identifier]

        definition = self._definitions.get(identifier)
        if definition is None:
            raise NotFoundError(identifier)

        self._circular_detector.push(identifier)
        try:
            built = definition.build(self.delegate)
        except (ConfigurationError, CircularDependencyError):
            raise
        except ContainerRuntimeError as e:
            # Raised by the definition itself: chain to the underlying failure instead.
            cause = e.__cause__ if e.identifier is None and e.__cause__ is not None else e
            raise ContainerRuntimeError(f"Error getting {identifier!r}: {e}", identifier) from cause
        except Exception as e:
            raise ContainerRuntimeError(f"Error getting {identifier!r}: {e}", identifier) from e
        finally:
            self._circular_detector.pop()

        self._logger.debug("Built %r from %s", identifier, type(definition).__name__)
        if definition.is_registered() and self._definitions.get(identifier) is definition:
            del self._definitions[identifier]
            self._registry[identifier] = built
        return built

    def _remove(self, identifier: str) -> None:
        """Drop identifier from both maps."""
        self._definitions.pop(identifier, None)
        self._registry.pop(identifier, None)
        self._stored.discard(identifier)

    def _link_child(self, child: "Container", prepend: bool) -> None:
        if not isinstance(child, Container):
            raise InvalidArgumentError(f"Child must be a Container, got {type(child).__name__}")
        if child is self or child._contains(self):
            raise InvalidArgumentError("Adding this child would make the container its own descendant")

        if not self._is_child(child):
            if prepend:
                self._children.insert(0, child)
            else:
                self._children.append(child)
            self._logger.debug("Container %r added child %r", self._self_id, child.self_id)
        if child.delegate is not self:
            child.set_delegate(self)

    def _is_child(self, container: "Container") -> bool:
        return any(child is container for child in self._children)

    def _contains(self, container: "Container") -> bool:
        """Whether container appears anywhere below this one."""
        return any(child is container or child._contains(container) for child in self._children)

    def _attach_cache(self, cache: Any) -> None:
        if isinstance(cache, Entry):
            cache = self.get(cache.id)
        if not _is_cache_adapter(cache):
            raise ConfigurationError(f"{type(cache).__name__} is not a cache adapter")

        try:
            snapshot = cache.get(self._cache_key, None)
        except Exception as e:
            raise ContainerRuntimeError(f"Could not read cache key {self._cache_key!r}: {e}") from e
        if snapshot is None:
            snapshot = {}
        if not isinstance(snapshot, dict):
            raise UnexpectedValueError(
                f"Cache key {self._cache_key!r} holds {type(snapshot).__name__}, expected dict"
            )

        for identifier, cached in snapshot.items():
            if identifier == self._self_id:
                continue
            self._remove(identifier)
            self._registry[identifier] = cached
            self._stored.add(identifier)
        self._cache = cache
        self._logger.debug("Loaded %d cached entries from %r", len(snapshot), self._cache_key)

    def _snapshot(self) -> Dict[str, Any]:
        """Values stored directly, without the self entry or results built from definitions."""
        return {
            key: entry
            for key, entry in self._registry.items()
            if key in self._stored and key != self._self_id
        }

    def _write_snapshot(self, snapshot: Dict[str, Any]) -> None:
        if self._cache is None:
            return
        try:
            written = self._cache.set(self._cache_key, snapshot)
        except Exception as e:
            raise ContainerRuntimeError(f"Could not write cache key {self._cache_key!r}: {e}") from e
        if not written:
            self._logger.warning("Cache adapter did not store key %r", self._cache_key)


def _validate_identifier(identifier: Any) -> None:
    if not isinstance(identifier, str) or not identifier:
        raise InvalidArgumentError(f"Identifier must be a non-empty string, got {identifier!r}")


def _is_cache_adapter(candidate: Any) -> bool:
    if isinstance(candidate, ICacheAdapter):
        return True
    if isinstance(candidate, IContainer):
        return False
    return all(callable(getattr(candidate, name, None)) for name in ("get", "set", "has", "delete"))
