"""
Domain layer - Core business logic and models.

This layer contains the fundamental business rules and models for dependency injection.
It has no dependencies on other layers.
"""

from .enums import DefinitionKind
from .exceptions import (
    DIException,
    DuplicateNameError,
    ExternalModuleNotFoundError,
    NotFoundError,
    WrongKindError,
)
from .interfaces import IContainer, IModuleProvider, IResolver
from .models import (
    ClassDefinition,
    ConstantDefinition,
    ContainerConfig,
    Definition,
    FactoryDefinition,
    FunctionDefinition,
    Registration,
)

__all__ = [
    # Enums
    "DefinitionKind",
    # Exceptions
    "DIException",
    "DuplicateNameError",
    "NotFoundError",
    "WrongKindError",
    "ExternalModuleNotFoundError",
    # Interfaces
    "IContainer",
    "IResolver",
    "IModuleProvider",
    # Models
    "Definition",
    "ClassDefinition",
    "ConstantDefinition",
    "FunctionDefinition",
    "FactoryDefinition",
    "Registration",
    "ContainerConfig",
]
