"""Application layer - Directory scanning and unit classification."""

import hashlib
import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Iterator, Optional, Tuple, Union

from depwire.application.resolver import DependencyResolver
from depwire.domain import (
    ClassDefinition,
    ConstantDefinition,
    FactoryDefinition,
    FunctionDefinition,
    IResolver,
    Registration,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _declares(unit: Any, field: str) -> bool:
    # Own attributes only, a base class flag does not count
    if isinstance(unit, ModuleType) or inspect.isclass(unit):
        return field in vars(unit)
    return hasattr(unit, field)


def _default_name(unit: Any) -> str:
    return getattr(unit, "__name__", type(unit).__name__).rpartition(".")[2]


def classify_unit(
    unit: Any,
    prefix: str = "",
    default_name: Optional[str] = None,
    resolver: Optional[IResolver] = None,
) -> Optional[Registration]:
    """Classify a loaded unit into a typed registration request.

    The first matching shape wins: a class, then a unit declaring ``factory``,
    then ``constant``, then ``function``. Units that themselves declare a truthy
    ``ignore`` (inherited flags do not count) and units matching no shape
    yield ``None``.

    Args:
        unit: A loaded module, or the object a module exposes as ``component``.
        prefix: Prepended to the chosen name.
        default_name: Name used when the unit declares no ``dep_name``.
            Classes default to their own ``__name__`` instead.
        resolver: Used to read a class's dependency names.

    Returns:
        The registration to hand to the container, or ``None`` to skip the unit.

    Example:
        >>> class Dog:
        ...     def __init__(self, Ball):
        ...         self.ball = Ball
        >>>
        >>> classify_unit(Dog, prefix="app_").name
        'app_Dog'
    """
    if _declares(unit, "ignore") and getattr(unit, "ignore"):
        return None

    dep_name = getattr(unit, "dep_name", None)

    if inspect.isclass(unit):
        resolver = resolver or DependencyResolver()
        definition = ClassDefinition(
            constructible=unit,
            dependencies=resolver.dependency_names(unit),
            singleton=getattr(unit, "singleton", True) is True,
        )
        return Registration(name=prefix + (dep_name or unit.__name__), definition=definition)

    name = prefix + (dep_name or default_name or _default_name(unit))
    if _declares(unit, "factory"):
        return Registration(name=name, definition=FactoryDefinition(factory=unit.factory))
    if _declares(unit, "constant"):
        return Registration(name=name, definition=ConstantDefinition(value=unit.constant))
    if _declares(unit, "function"):
        return Registration(name=name, definition=FunctionDefinition(function=unit.function))
    return None


class DirectoryScanner:
    """Discovers and loads source files as registrable units.

    Attributes:
        extensions: File suffixes treated as units.
    """

    def __init__(self, extensions: Tuple[str, ...] = (".py",)) -> None:
        self.extensions = extensions

    def walk(self, directory: PathLike) -> Iterator[Path]:
        """Yield every unit file below a directory, recursively, in sorted order.

        Args:
            directory: The directory to walk.

        Raises:
            NotADirectoryError: If the path is not a directory.
        """
        root = Path(directory).resolve()
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")
        logger.debug("Walking directory: %s", root)
        for entry in sorted(root.iterdir()):
            if entry.is_dir() and not entry.is_symlink():
                yield from self.walk(entry)
            elif entry.suffix in self.extensions and not entry.name.startswith("__"):
                yield entry

    def load(self, path: PathLike, reload: bool = False) -> Any:
        """Execute a source file and return its unit.

        The unit is the module's ``component`` attribute when it has one,
        otherwise the module itself. Loaded modules stay in ``sys.modules`` for
        the life of the process, so loading the same file again returns the
        same unit even if the file changed on disk, unless ``reload`` is set.

        Args:
            path: The file to load.
            reload: Execute the file again instead of returning the cached unit.

        Raises:
            ImportError: If the file cannot be loaded as a module.
        """
        full_path = Path(path).resolve()
        digest = hashlib.sha1(str(full_path).encode("utf-8")).hexdigest()[:12]
        module_name = f"_depwire_unit_{full_path.stem}_{digest}"

        if reload:
            sys.modules.pop(module_name, None)

        module = sys.modules.get(module_name)
        if module is None:
            spec = importlib.util.spec_from_file_location(module_name, full_path)
            if spec is None or spec.loader is None:
                raise ImportError(f"Cannot load unit from {full_path}")
            module = importlib.util.module_from_spec(spec)
            sys.modules[module_name] = module
            try:
                spec.loader.exec_module(module)
            except BaseException:
                del sys.modules[module_name]
                raise

        return getattr(module, "component", module)
