import logging
from typing import Any, Dict, MutableMapping, Optional

from keyed_di.domain import ICacheAdapter

logger = logging.getLogger(__name__)


class MappingCacheAdapter(ICacheAdapter):
    """Cache adapter over any mutable mapping.

    Useful with a ``shelve`` handle or any dict-like store that should outlive
    a single container.

    Attributes:
        _store: The wrapped mapping.

    Example:
        >>> import shelve
        >>> with shelve.open("registry.db") as db:
        ...     container = Container(cache=MappingCacheAdapter(db))
    """

    def __init__(self, store: MutableMapping[str, Any]) -> None:
        self._store = store

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._store.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        self._store[key] = value
        logger.debug("Stored cache key %r", key)
        return True

    def has(self, key: str) -> bool:
        return key in self._store

    def delete(self, key: str) -> bool:
        self._store.pop(key, None)
        logger.debug("Deleted cache key %r", key)
        return True


class InMemoryCacheAdapter(MappingCacheAdapter):
    """Cache adapter keeping values in a process-local dict."""

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}
        super().__init__(self._values)

    def clear(self) -> None:
        """Remove every stored value."""
        self._values.clear()
