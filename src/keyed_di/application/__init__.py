"""
Application layer - Use cases and orchestration.

This layer contains the container, the definitions it builds and the
parameter resolution they share.
It depends only on the Domain layer.
"""

from .actions import CallMethod, SetProperty
from .circular_detector import CircularDependencyDetector
from .container import DEFAULT_CACHE_KEY, DEFAULT_SELF_ID, Container
from .definitions import AbstractDefinition, FactoryDefinition, ObjectDefinition, ValueDefinition
from .helpers import entry, factory, obj, object_, value
from .parameters import ParameterResolver

__all__ = [
    "Container",
    "DEFAULT_SELF_ID",
    "DEFAULT_CACHE_KEY",
    "AbstractDefinition",
    "ObjectDefinition",
    "FactoryDefinition",
    "ValueDefinition",
    "CallMethod",
    "SetProperty",
    "ParameterResolver",
    "CircularDependencyDetector",
    "entry",
    "object_",
    "obj",
    "factory",
    "value",
]
