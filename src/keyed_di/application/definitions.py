import importlib
import inspect
import logging
from abc import abstractmethod
from typing import Any, Callable, List, Type, Union

from keyed_di.application.actions import CallMethod, SetProperty
from keyed_di.application.parameters import ParameterResolver
from keyed_di.domain import (
    ConfigurationError,
    ContainerRuntimeError,
    Entry,
    IContainer,
    IDefinition,
    IInstanceAction,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

# Results of exactly these types skip instance actions; their subclasses are treated as objects.
PLAIN_VALUE_TYPES = (type(None), bool, int, float, complex, str, bytes, bytearray, list, tuple, dict, set, frozenset)


class AbstractDefinition(IDefinition):
    """Shared build algorithm for all definition variants.

    Subclasses provide ``_factory_method``; this class runs it and applies the
    queued instance actions to the result, in the order they were added.

    Attributes:
        _registered: Whether the container should cache the built value.
        _actions: Instance actions to run on the built object.
        _resolver: Resolves entries nested in parameters.
    """

    def __init__(self, registered: bool = True) -> None:
        self._registered = registered
        self._actions: List[IInstanceAction] = []
        self._resolver = ParameterResolver()

    def build(self, container: IContainer) -> Any:
        """Build the entry value.

        Args:
            container: The container parameter entries are resolved from.

        Returns:
            The built value, with every queued action applied if it is an object.

        Raises:
            ContainerRuntimeError: If the constructor or factory raises.
            ConfigurationError: If an action targets a missing method or property.
        """
        result = self._factory_method(container)
        if type(result) in PLAIN_VALUE_TYPES:
            return result
        for action in self._actions:
            result = action(result, container)
        return result

    def is_registered(self) -> bool:
        return self._registered

    @property
    def actions(self) -> List[IInstanceAction]:
        """Copy of the queued instance actions."""
        return list(self._actions)

    def method(self, name: str, parameters: Any = None) -> "AbstractDefinition":
        """Queue a method call to run after the object is built.

        Args:
            name: Method name to call.
            parameters: Positional list or keyword mapping of arguments. Use
                ``entry()`` to pass another container entry.

        Returns:
            This definition, so calls can be chained.
        """
        self._actions.append(CallMethod(name=name, parameters=[] if parameters is None else parameters))
        return self

    def property(self, name: str, value: Any = None) -> "AbstractDefinition":
        """Queue an attribute assignment to run after the object is built.

        Args:
            name: Attribute name to set.
            value: Value to assign; may be or contain entries.

        Returns:
            This definition, so calls can be chained.
        """
        self._actions.append(SetProperty(name=name, value=value))
        return self

    @abstractmethod
    def _factory_method(self, container: IContainer) -> Any:
        """Produce the raw result before instance actions are applied."""


class ObjectDefinition(AbstractDefinition):
    """Definition for an entry built by instantiating a class.

    The class is given either directly or as a dotted import path, and is
    resolved when the definition is created so a typo fails immediately.

    Example:
        >>> definition = ObjectDefinition("logging.Logger", ["app"])
        >>> definition.method("setLevel", ["DEBUG"])
    """

    def __init__(self, class_name: Union[str, Type], parameters: Any = None, registered: bool = True) -> None:
        super().__init__(registered)
        self._class = _load_class(class_name)
        self._parameters = [] if parameters is None else parameters

    @property
    def class_(self) -> Type:
        return self._class

    @property
    def parameters(self) -> Any:
        return self._parameters

    def _factory_method(self, container: IContainer) -> Any:
        arguments = self._resolver.resolve(self._parameters, container)
        try:
            return self._resolver.call(self._class, arguments)
        except Exception as e:
            raise ContainerRuntimeError(f"Failed to construct {self._class.__name__}: {e}") from e


class FactoryDefinition(AbstractDefinition):
    """Definition for an entry built by calling a user-supplied callable.

    The callable may be given as:
    - any callable;
    - an ``Entry`` whose resolved value is callable;
    - a ``(target, "method")`` pair, where target is an object or an ``Entry``.

    Example:
        >>> FactoryDefinition(make_connection, [entry("dsn")], registered=False)
        >>> FactoryDefinition((entry("pool"), "acquire"))
    """

    def __init__(self, callable_: Any, parameters: Any = None, registered: bool = True) -> None:
        super().__init__(registered)
        if not _is_factory_target(callable_):
            raise InvalidArgumentError(f"{callable_!r} is not a callable, an entry or a (target, method) pair")
        self._callable = callable_
        self._parameters = [] if parameters is None else parameters

    @property
    def callable(self) -> Any:
        return self._callable

    @property
    def parameters(self) -> Any:
        return self._parameters

    def _factory_method(self, container: IContainer) -> Any:
        target = self._resolve_callable(container)
        arguments = self._resolver.resolve(self._parameters, container)
        try:
            return self._resolver.call(target, arguments)
        except Exception as e:
            raise ContainerRuntimeError(f"Factory {_describe(self._callable)} failed: {e}") from e

    def _resolve_callable(self, container: IContainer) -> Callable[..., Any]:
        if isinstance(self._callable, tuple):
            owner, name = self._callable
            owner = self._resolver.resolve(owner, container)
            target = getattr(owner, name, None)
        else:
            target = self._resolver.resolve(self._callable, container)
        if not callable(target):
            raise ConfigurationError(f"Factory {_describe(self._callable)} did not resolve to a callable")
        return target


class ValueDefinition(AbstractDefinition):
    """Definition for an entry that is a literal value.

    Instance actions still apply when the value is an object.
    """

    def __init__(self, value: Any, registered: bool = True) -> None:
        super().__init__(registered)
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def _factory_method(self, container: IContainer) -> Any:
        return self._value


def _load_class(class_name: Union[str, Type]) -> Type:
    """Resolve a class object or a dotted import path to a class.

    Raises:
        ConfigurationError: If the path cannot be imported or does not name a class.
    """
    if inspect.isclass(class_name):
        return class_name
    if not isinstance(class_name, str) or not class_name:
        raise ConfigurationError(f"{class_name!r} is not a valid class name")

    module_name, _, attribute = class_name.rpartition(".")
    module_name = module_name or "builtins"
    try:
        module = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError) as e:
        raise ConfigurationError(f"{class_name} is not a valid class name: {e}") from e

    loaded = getattr(module, attribute, None)
    if not inspect.isclass(loaded):
        raise ConfigurationError(f"{class_name} is not a valid class name")
    logger.debug("Loaded class %s for object definition", class_name)
    return loaded


def _is_factory_target(candidate: Any) -> bool:
    if isinstance(candidate, Entry) or callable(candidate):
        return True
    return isinstance(candidate, tuple) and len(candidate) == 2 and isinstance(candidate[1], str)


def _describe(candidate: Any) -> str:
    if isinstance(candidate, tuple):
        return f"{candidate[0]}.{candidate[1]}"
    return getattr(candidate, "__qualname__", repr(candidate))
