from collections.abc import Mapping
from typing import Any, Callable

from keyed_di.domain import Entry, IContainer


class ParameterResolver:
    """Resolves definition parameters against a container.

    Parameters are plain values, ``Entry`` references, or lists, tuples and
    dicts nesting either. Entries are replaced by the container entry they name;
    containers are rebuilt element by element; everything else is left as is.
    """

    def resolve(self, parameter: Any, container: IContainer) -> Any:
        """Resolve a parameter recursively.

        Args:
            parameter: The parameter to resolve.
            container: The container entries are looked up in.

        Returns:
            The parameter with every nested ``Entry`` replaced by its resolved value.

        Example:
            >>> container.set("greeting", "hello")
            >>> resolver.resolve([Entry("greeting"), {"name": Entry("greeting")}], container)
            ['hello', {'name': 'hello'}]
        """
        if isinstance(parameter, Entry):
            return container.get(parameter.id)
        if isinstance(parameter, list):
            return [self.resolve(item, container) for item in parameter]
        if isinstance(parameter, tuple):
            return tuple(self.resolve(item, container) for item in parameter)
        if isinstance(parameter, dict):
            return {key: self.resolve(item, container) for key, item in parameter.items()}
        return parameter

    def invoke(self, target: Callable[..., Any], parameters: Any, container: IContainer) -> Any:
        """Resolve parameters and call target with them.

        A mapping is passed as keyword arguments, any other sequence as
        positional arguments, and ``None`` as no arguments at all.

        Args:
            target: The callable to invoke.
            parameters: The unresolved parameters.
            container: The container entries are looked up in.

        Returns:
            Whatever target returns.
        """
        return self.call(target, self.resolve(parameters, container))

    @staticmethod
    def call(target: Callable[..., Any], arguments: Any) -> Any:
        """Call target with already resolved arguments.

        Args:
            target: The callable to invoke.
            arguments: ``None``, a keyword mapping, or a positional sequence.

        Returns:
            Whatever target returns.
        """
        if arguments is None:
            return target()
        if isinstance(arguments, Mapping):
            return target(**arguments)
        return target(*arguments)
