"""Shorthand constructors for entries and definitions.

Example:
    >>> container = Container({
    ...     "dsn": value("sqlite:///app.db"),
    ...     "engine": factory(create_engine, [entry("dsn")]),
    ...     "repository": object_("app.repositories.UserRepository", [entry("engine")])
    ...         .method("warm_up")
    ...         .property("page_size", 50),
    ... })
"""

from typing import Any, Type, Union

from keyed_di.application.definitions import FactoryDefinition, ObjectDefinition, ValueDefinition
from keyed_di.domain import Entry


def entry(identifier: str) -> Entry:
    """Reference another container entry from inside a definition."""
    return Entry(identifier)


def object_(class_name: Union[str, Type], parameters: Any = None, registered: bool = True) -> ObjectDefinition:
    """Define an entry built by instantiating a class.

    Args:
        class_name: The class, or its dotted import path.
        parameters: Constructor arguments, positional list or keyword mapping.
        registered: Whether the built instance is cached by the container.

    Raises:
        ConfigurationError: If class_name does not name an importable class.
    """
    return ObjectDefinition(class_name, parameters, registered)


def factory(callable_: Any, parameters: Any = None, registered: bool = True) -> FactoryDefinition:
    """Define an entry built by calling a callable.

    Args:
        callable_: A callable, an entry resolving to one, or a (target, method name) pair.
        parameters: Call arguments, positional list or keyword mapping.
        registered: Whether the result is cached by the container.
    """
    return FactoryDefinition(callable_, parameters, registered)


def value(literal: Any, registered: bool = True) -> ValueDefinition:
    """Define an entry holding a literal value."""
    return ValueDefinition(literal, registered)


obj = object_
