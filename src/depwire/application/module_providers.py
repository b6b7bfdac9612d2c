"""Application layer - External module providers consulted on lookup miss."""

import importlib
import importlib.util
from typing import Any, Dict, Mapping, Optional

from depwire.domain import IModuleProvider


class ImportlibModuleProvider(IModuleProvider):
    """Resolves names against the interpreter's importable modules.

    Existence is checked with ``importlib.util.find_spec`` so the module is
    only located, not executed. Dotted names import their parent packages
    as part of the check; use ``MappingModuleProvider`` where that side
    effect is unwanted.
    """

    def exists(self, name: str) -> bool:
        try:
            return importlib.util.find_spec(name) is not None
        except (ImportError, ValueError):
            # Missing parent package or malformed name such as "-dog"
            return False

    def load(self, name: str) -> Any:
        return importlib.import_module(name)


class MappingModuleProvider(IModuleProvider):
    """Resolves names against a mapping supplied by the host application.

    Attributes:
        _modules: Mapping from module name to the value returned by ``load``.

    Example:
        >>> provider = MappingModuleProvider({"socket.io": socketio_client})
        >>> container = DependencyContainer(module_provider=provider)
        >>> container.get("socketIo") is socketio_client
        True
    """

    def __init__(self, modules: Optional[Mapping[str, Any]] = None) -> None:
        self._modules: Dict[str, Any] = dict(modules or {})

    def exists(self, name: str) -> bool:
        return name in self._modules

    def load(self, name: str) -> Any:
        return self._modules[name]

    def add(self, name: str, module: Any) -> None:
        """Expose a module under a name."""
        self._modules[name] = module
