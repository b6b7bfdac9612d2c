"""
FastAPI integration module.

Provides helpers and utilities for integrating depwire with FastAPI.
"""

from .integration import (
    attach_container,
    create_fastapi_dependency,
    create_request_dependency,
    inject_dependencies,
)

__all__ = [
    "attach_container",
    "create_fastapi_dependency",
    "create_request_dependency",
    "inject_dependencies",
]
