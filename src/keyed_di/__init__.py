"""
keyed-di: String-keyed Dependency Injection container with lazy definitions
and composite/delegate chaining.

Public API exports for the keyed-di package.
"""

# Application exports
from keyed_di.application.container import DEFAULT_CACHE_KEY, DEFAULT_SELF_ID, Container
from keyed_di.application.definitions import FactoryDefinition, ObjectDefinition, ValueDefinition
from keyed_di.application.helpers import entry, factory, obj, object_, value

# Domain exports
from keyed_di.domain.exceptions import (
    CircularDependencyError,
    ConfigurationError,
    ContainerRuntimeError,
    DIException,
    InvalidArgumentError,
    NotFoundError,
    UnexpectedValueError,
)
from keyed_di.domain.interfaces import ICacheAdapter, IContainer, IDefinition
from keyed_di.domain.models import Entry

__version__ = "0.1.0"

__all__ = [
    # Container
    "Container",
    "DEFAULT_SELF_ID",
    "DEFAULT_CACHE_KEY",
    # Definitions
    "ObjectDefinition",
    "FactoryDefinition",
    "ValueDefinition",
    "Entry",
    # Helpers
    "entry",
    "object_",
    "obj",
    "factory",
    "value",
    # Interfaces
    "IContainer",
    "IDefinition",
    "ICacheAdapter",
    # Exceptions
    "DIException",
    "NotFoundError",
    "InvalidArgumentError",
    "ConfigurationError",
    "ContainerRuntimeError",
    "UnexpectedValueError",
    "CircularDependencyError",
]
