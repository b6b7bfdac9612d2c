"""
depwire: Name-based Dependency Injection container with constructor auto-wiring.

Public API exports for the depwire package.
"""

import logging

# Application exports
from depwire.application.container import DependencyContainer, create_container
from depwire.application.module_providers import ImportlibModuleProvider, MappingModuleProvider

# Domain exports
from depwire.domain.enums import DefinitionKind
from depwire.domain.exceptions import (
    DIException,
    DuplicateNameError,
    ExternalModuleNotFoundError,
    NotFoundError,
    WrongKindError,
)
from depwire.domain.models import ContainerConfig

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Container
    "DependencyContainer",
    "create_container",
    "ContainerConfig",
    # Module providers
    "ImportlibModuleProvider",
    "MappingModuleProvider",
    # Enums
    "DefinitionKind",
    # Exceptions
    "DIException",
    "DuplicateNameError",
    "NotFoundError",
    "WrongKindError",
    "ExternalModuleNotFoundError",
]
