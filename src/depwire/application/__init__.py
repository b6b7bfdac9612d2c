"""
Application layer - Use cases and orchestration.

This layer contains the use cases that orchestrate domain objects.
It depends only on the Domain layer.
"""

from .container import DependencyContainer, create_container
from .module_providers import ImportlibModuleProvider, MappingModuleProvider
from .name_resolver import candidate_names, to_dash_case, to_dot_case
from .resolver import DependencyResolver
from .scanner import DirectoryScanner, classify_unit

__all__ = [
    "DependencyContainer",
    "create_container",
    "DependencyResolver",
    "DirectoryScanner",
    "classify_unit",
    "ImportlibModuleProvider",
    "MappingModuleProvider",
    "to_dash_case",
    "to_dot_case",
    "candidate_names",
]
