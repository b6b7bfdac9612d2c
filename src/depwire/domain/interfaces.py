from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Type

from depwire.domain.models import ClassDefinition, Definition, Registration


class IContainer(ABC):
    """Abstract interface for dependency injection container operations."""

    @abstractmethod
    def register(self, registration: Registration) -> None:
        """Register a typed registration request.

        Args:
            registration: The name and definition to store.
        """

    @abstractmethod
    def register_constant(self, name: str, value: Any) -> None:
        """Register a value returned verbatim."""

    @abstractmethod
    def register_function(self, name: str, func: Callable[..., Any]) -> None:
        """Register a callable returned without being invoked."""

    @abstractmethod
    def register_factory(self, name: str, factory: Callable[["IContainer"], Any]) -> None:
        """Register a builder invoked with the container on each resolution."""

    @abstractmethod
    def register_class(
        self,
        name: str,
        cls: Type,
        dependencies: Optional[List[str]] = None,
        singleton: bool = True,
    ) -> None:
        """Register a class wired from its constructor dependencies."""

    @abstractmethod
    def has(self, name: str) -> bool:
        """Return whether the name is registered locally."""

    @abstractmethod
    def get(self, name: str) -> Any:
        """Resolve and return the value for the requested name.

        Args:
            name: The dependency name to resolve.
        """

    @abstractmethod
    def get_class(self, name: str) -> Type:
        """Return the registered class for a class definition."""

    @abstractmethod
    def get_registry_copy(self) -> Dict[str, Definition]:
        """Get a copy of the current registry of dependencies."""


class IResolver(ABC):
    """Abstract interface for class wiring operations."""

    @abstractmethod
    def dependency_names(self, cls: Type) -> List[str]:
        """Return the dependency names declared by a class.

        Args:
            cls: The class to inspect.
        """

    @abstractmethod
    def instantiate(self, definition: ClassDefinition, container: IContainer) -> Any:
        """Resolve the definition's dependencies and create an instance.

        Args:
            definition: The class definition to build.
            container: The container used to resolve each dependency.

        Returns:
            New instance with all dependencies passed positionally.
        """


class IModuleProvider(ABC):
    """Abstract interface for the external module namespace."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return whether a module by this name can be loaded, without loading it."""

    @abstractmethod
    def load(self, name: str) -> Any:
        """Load and return the module by this name."""
