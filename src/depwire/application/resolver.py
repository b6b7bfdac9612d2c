import inspect
from typing import Any, List, Type

from depwire.domain import ClassDefinition, IContainer, IResolver

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class DependencyResolver(IResolver):
    """Resolves class dependencies using constructor parameter names.

    Uses Python's inspect module to read the constructor signature. Each
    parameter name is the name of a dependency in the container.
    """

    def dependency_names(self, cls: Type) -> List[str]:
        """Return the dependency names declared by a class.

        An explicit ``dependencies`` list or tuple of names on the class wins over
        introspection; any other ``dependencies`` attribute, such as a method, is ignored.
        Otherwise the positional constructor parameters without defaults are
        returned in source order.

        Args:
            cls: The class to inspect.

        Returns:
            Ordered list of dependency names, empty for a no-argument constructor.

        Example:
            >>> class Dog:
            ...     def __init__(self, Ball, owner=None):
            ...         self.ball = Ball
            >>>
            >>> DependencyResolver().dependency_names(Dog)
            ['Ball']
        """
        declared = getattr(cls, "dependencies", None)
        if isinstance(declared, (list, tuple)) and all(isinstance(name, str) for name in declared):
            return list(declared)

        # object takes no dependencies
        if cls.__init__ is object.__init__ and cls.__new__ is object.__new__:
            return []

        # Signature of the class covers both __new__ and __init__, without self
        signature = inspect.signature(cls)
        names = []
        for param_name, param in signature.parameters.items():
            if param.kind not in _POSITIONAL:
                continue
            if param.default is not inspect.Parameter.empty:
                continue
            names.append(param_name)
        return names

    def instantiate(self, definition: ClassDefinition, container: IContainer) -> Any:
        """Resolve the definition's dependencies and create an instance.

        Args:
            definition: The class definition to build.
            container: The container used to resolve each dependency.

        Returns:
            New instance with resolved dependencies passed positionally.
        """
        args = [container.get(name) for name in definition.dependencies]
        return definition.constructible(*args)
