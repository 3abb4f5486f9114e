"""Application layer - Post-construction instance actions."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from keyed_di.application.parameters import ParameterResolver
from keyed_di.domain import ConfigurationError, IContainer, IInstanceAction

_resolver = ParameterResolver()


class CallMethod(BaseModel, IInstanceAction):
    """Calls a method on a freshly built object.

    Attributes:
        name: Name of the method to call.
        parameters: Positional list or keyword mapping of arguments; may contain entries.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Name of the method to call.")
    parameters: Any = Field(default_factory=list, description="Arguments passed to the method.")

    def __call__(self, obj: Any, container: IContainer) -> Any:
        """Call the method on obj and return obj.

        Raises:
            ConfigurationError: If obj has no callable attribute with this name.
        """
        method = getattr(obj, self.name, None)
        if not callable(method):
            raise ConfigurationError(f"Method {self.name} does not exist on {type(obj).__name__} objects")
        _resolver.invoke(method, self.parameters, container)
        return obj


class SetProperty(BaseModel, IInstanceAction):
    """Assigns an attribute on a freshly built object.

    The attribute must already exist on the object, or be declared in the
    annotations of its class or one of its bases.

    Attributes:
        name: Name of the attribute to set.
        value: Value to assign; may be or contain entries.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Name of the attribute to set.")
    value: Any = Field(default=None, description="Value assigned to the attribute.")

    def __call__(self, obj: Any, container: IContainer) -> Any:
        """Set the attribute on obj and return obj.

        Raises:
            ConfigurationError: If obj has no such attribute.
        """
        if not _has_property(obj, self.name):
            raise ConfigurationError(f"Property {self.name} does not exist on {type(obj).__name__} objects")
        setattr(obj, self.name, _resolver.resolve(self.value, container))
        return obj


def _has_property(obj: Any, name: str) -> bool:
    if hasattr(obj, name):
        return True
    return any(name in getattr(klass, "__annotations__", {}) for klass in type(obj).__mro__)
