import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Type, Union

from depwire.application.module_providers import ImportlibModuleProvider
from depwire.application.name_resolver import candidate_names
from depwire.application.resolver import DependencyResolver
from depwire.application.scanner import DirectoryScanner, classify_unit
from depwire.domain import (
    ClassDefinition,
    ConstantDefinition,
    ContainerConfig,
    Definition,
    DefinitionKind,
    DuplicateNameError,
    ExternalModuleNotFoundError,
    FactoryDefinition,
    FunctionDefinition,
    IContainer,
    IModuleProvider,
    IResolver,
    NotFoundError,
    Registration,
    WrongKindError,
)

logger = logging.getLogger(__name__)


class DependencyContainer(IContainer):
    """Main dependency injection container.

    Maps unique names to definitions and resolves a requested name into a
    fully wired value. Class definitions are built by resolving every
    constructor parameter name through the same container. Names missing
    from the registry are looked up through the module provider.

    Recursion is unguarded: a cyclic dependency graph raises ``RecursionError``.

    Attributes:
        _config: Immutable container configuration.
        _registry: Dictionary mapping names to their definitions.
        _resolver: Component responsible for class wiring.
        _module_provider: External namespace consulted on lookup miss.
        _scanner: Collaborator walking and loading unit files.
    """

    def __init__(
        self,
        config: Optional[ContainerConfig] = None,
        module_provider: Optional[IModuleProvider] = None,
        resolver: Optional[IResolver] = None,
        scanner: Optional[DirectoryScanner] = None,
    ) -> None:
        """Initialize the container with an empty registry.

        Args:
            config: Container configuration. Defaults to ``ContainerConfig()``.
            module_provider: External module namespace. Defaults to importable modules.
            resolver: Class wiring component.
            scanner: Unit discovery component used by ``add_directory`` and ``add_file``.
        """
        self._config = config or ContainerConfig()
        self._registry: Dict[str, Definition] = {}
        self._resolver: IResolver = resolver or DependencyResolver()
        self._module_provider: IModuleProvider = module_provider or ImportlibModuleProvider()
        self._scanner = scanner or DirectoryScanner()
        self._debug(
            f"Set config: prefix={self._config.prefix!r}, "
            f"external_module_prefix={self._config.external_module_prefix!r}"
        )

    @property
    def config(self) -> ContainerConfig:
        return self._config

    @property
    def module_provider(self) -> IModuleProvider:
        return self._module_provider

    def register(self, registration: Registration) -> None:
        """Store a typed registration request.

        Args:
            registration: The name and definition to store.

        Raises:
            DuplicateNameError: If the name is already registered.
        """
        if registration.name in self._registry:
            raise DuplicateNameError(registration.name)
        self._debug(f"Setting dependency for: {registration.name}")
        self._registry[registration.name] = registration.definition

    def register_constant(self, name: str, value: Any) -> None:
        """Register a value returned verbatim on every resolution.

        Raises:
            DuplicateNameError: If the name is already registered.

        Example:
            >>> container.register_constant("Ball", {"squeeze": True})
        """
        self.register(Registration(name=name, definition=ConstantDefinition(value=value)))

    def register_function(self, name: str, func: Callable[..., Any]) -> None:
        """Register a callable returned as is; the container never calls it.

        Raises:
            DuplicateNameError: If the name is already registered.
        """
        self.register(Registration(name=name, definition=FunctionDefinition(function=func)))

    def register_factory(self, name: str, factory: Callable[[IContainer], Any]) -> None:
        """Register a builder called with the container on every resolution.

        Results are never cached.

        Raises:
            DuplicateNameError: If the name is already registered.

        Example:
            >>> container.register_factory("Clock", lambda c: Clock(c.get("Timezone")))
        """
        self.register(Registration(name=name, definition=FactoryDefinition(factory=factory)))

    def register_class(
        self,
        name: str,
        cls: Type,
        dependencies: Optional[List[str]] = None,
        singleton: bool = True,
    ) -> None:
        """Register a class wired from its constructor dependencies.

        Args:
            name: The name to register the class under.
            cls: The class to instantiate.
            dependencies: Dependency names in constructor order. Read from the
                constructor signature when omitted.
            singleton: Cache the first instance and return it thereafter.

        Raises:
            DuplicateNameError: If the name is already registered.
        """
        if dependencies is None:
            dependencies = self._resolver.dependency_names(cls)
        definition = ClassDefinition(constructible=cls, dependencies=dependencies, singleton=singleton)
        self.register(Registration(name=name, definition=definition))

    def register_from_scanned_unit(
        self,
        unit: Any,
        prefix: Optional[str] = None,
        default_name: Optional[str] = None,
    ) -> Optional[Registration]:
        """Classify a loaded unit and register it under its derived name.

        Units flagged ``ignore`` and units matching no recognized shape are skipped.

        Args:
            unit: A loaded module or the object a module exposes as ``component``.
            prefix: Name prefix. Defaults to the configured prefix.
            default_name: Name for non-class units that declare no ``dep_name``.

        Returns:
            The registration that was stored, or ``None`` if the unit was skipped.

        Raises:
            DuplicateNameError: If the derived name is already registered.
        """
        if prefix is None:
            prefix = self._config.prefix
        registration = classify_unit(unit, prefix=prefix, default_name=default_name, resolver=self._resolver)
        if registration is None:
            return None
        self._debug(f"Adding {registration.definition.kind} definition: {registration.name}")
        self.register(registration)
        return registration

    def add_file(self, path: Union[str, Path], prefix: Optional[str] = None) -> Optional[Registration]:
        """Load one source file and register its unit.

        The file stem is the default name of non-class units.

        Args:
            path: The file to load.
            prefix: Name prefix. Defaults to the configured prefix.
        """
        path = Path(path)
        unit = self._scanner.load(path)
        self._debug(f"Processing file: {path}")
        return self.register_from_scanned_unit(unit, prefix=prefix, default_name=path.stem)

    def add_directory(self, directory: Union[str, Path], prefix: Optional[str] = None) -> List[Registration]:
        """Recursively register every source file below a directory.

        Args:
            directory: The directory to scan.
            prefix: Name prefix. Defaults to the configured prefix.

        Returns:
            The registrations that were stored, in scan order.

        Example:
            >>> container = create_container(prefix="app_")
            >>> container.add_directory("services")
            >>> dog = container.get("app_Dog")
        """
        self._debug(f"Adding directory: {directory}")
        registrations = []
        for path in self._scanner.walk(directory):
            registration = self.add_file(path, prefix=prefix)
            if registration is not None:
                registrations.append(registration)
        return registrations

    def has(self, name: str) -> bool:
        """Return whether the name is registered. The module provider is not consulted."""
        return name in self._registry

    def get(self, name: str) -> Any:
        """Resolve and return the value for the requested name.

        Names starting with the external module prefix, and names missing from
        the registry, are resolved through the module provider.

        Args:
            name: The dependency name to resolve.

        Returns:
            The constant, the function, a factory result, or a wired class instance.

        Raises:
            ExternalModuleNotFoundError: If the name is not registered and no
                module provider candidate exists.

        Example:
            >>> container.register_constant("Ball", {"squeeze": True})
            >>> container.register_class("Dog", Dog)
            >>> container.get("Dog").ball
            {'squeeze': True}
        """
        external_prefix = self._config.external_module_prefix
        if external_prefix and name.startswith(external_prefix):
            return self._get_external_module(name[len(external_prefix) :])
        if not self.has(name):
            return self._get_external_module(name)

        definition = self._registry[name]

        if definition.kind == DefinitionKind.CONSTANT:
            return definition.value

        if definition.kind == DefinitionKind.FUNCTION:
            return definition.function

        if definition.kind == DefinitionKind.FACTORY:
            self._debug(f"Calling factory: {name}")
            return definition.factory(self)

        if definition.singleton and definition.is_instantiated:
            return definition.instance

        self._debug(f"Instantiating class: {name}")
        instance = self._resolver.instantiate(definition, self)
        if definition.singleton:
            definition.instance = instance
        return instance

    def get_class(self, name: str) -> Type:
        """Return the registered class itself, not an instance.

        Raises:
            NotFoundError: If the name is not registered.
            WrongKindError: If the definition is not a class definition.
        """
        if not self.has(name):
            raise NotFoundError(name)

        definition = self._registry[name]
        if definition.kind != DefinitionKind.CLASS:
            raise WrongKindError(name, definition.kind)
        return definition.constructible

    def get_registry_copy(self) -> Dict[str, Definition]:
        """Get a shallow copy of the registry.

        Returns:
            Copy of the name-to-definition mapping.
        """
        return self._registry.copy()

    def names(self) -> List[str]:
        """Return the registered names, sorted."""
        return sorted(self._registry)

    def _get_external_module(self, name: str) -> Any:
        self._debug(f"_get_external_module({name})")
        attempted = candidate_names(name)
        for candidate in attempted:
            if self._module_provider.exists(candidate):
                self._debug(f"Returning external module: {candidate}")
                return self._module_provider.load(candidate)
        raise ExternalModuleNotFoundError(name, attempted)

    def _debug(self, message: str) -> None:
        logger.debug(message)
        if self._config.debug:
            self._config.debug(message)


def create_container(
    module_provider: Optional[IModuleProvider] = None,
    **options: Any,
) -> DependencyContainer:
    """Create a container from configuration options.

    Args:
        module_provider: External module namespace.
        **options: ``ContainerConfig`` fields: ``prefix``, ``external_module_prefix``, ``debug``.

    Example:
        >>> container = create_container(prefix="app_", debug=print)
    """
    return DependencyContainer(ContainerConfig(**options), module_provider=module_provider)
