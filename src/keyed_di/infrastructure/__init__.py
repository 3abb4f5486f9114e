"""
Infrastructure layer - External integrations.

This layer contains cache adapters and integrations with external frameworks and tools.
It depends on both Application and Domain layers.
"""

from . import cache, fastapi_integration, testing

__all__ = [
    "cache",
    "fastapi_integration",
    "testing",
]
