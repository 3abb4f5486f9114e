"""
Domain layer - Core business logic and models.

This layer contains the error taxonomy, the abstract contracts and the value
objects shared by the container and its definitions.
It has no dependencies on other layers.
"""

from .exceptions import (
    CircularDependencyError,
    ConfigurationError,
    ContainerRuntimeError,
    DIException,
    InvalidArgumentError,
    NotFoundError,
    UnexpectedValueError,
)
from .interfaces import ICacheAdapter, IContainer, IDefinition, IInstanceAction
from .models import Entry, ResolutionContext

__all__ = [
    # Exceptions
    "DIException",
    "NotFoundError",
    "InvalidArgumentError",
    "ConfigurationError",
    "ContainerRuntimeError",
    "UnexpectedValueError",
    "CircularDependencyError",
    # Interfaces
    "IContainer",
    "IDefinition",
    "IInstanceAction",
    "ICacheAdapter",
    # Models
    "Entry",
    "ResolutionContext",
]
