"""
Cache adapters module.

Provides key-value stores a container can mirror its registry into.
"""

from .adapters import InMemoryCacheAdapter, MappingCacheAdapter

__all__ = [
    "InMemoryCacheAdapter",
    "MappingCacheAdapter",
]
