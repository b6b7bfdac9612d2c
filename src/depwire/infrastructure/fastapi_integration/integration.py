import functools
import inspect
from typing import Any, Callable

from fastapi import FastAPI, Request

from depwire.domain import IContainer


def create_fastapi_dependency(container: IContainer, name: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves a name from the container.

    The resolved value follows the registration in the container: singleton
    classes are shared, factories run on every request.

    Args:
        container: The DI container to resolve dependencies from.
        name: The dependency name to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = create_container()
        >>> container.register_class("UserRepository", UserRepository)
        >>>
        >>> get_user_repo = create_fastapi_dependency(container, "UserRepository")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the dependency from the container."""
        return container.get(name)

    return dependency


def attach_container(app: FastAPI, container: IContainer) -> None:
    """Store a container on the application state.

    Dependencies created with ``create_request_dependency`` resolve from it.

    Args:
        app: The FastAPI application.
        container: The container to attach.
    """
    app.state.di_container = container


def create_request_dependency(name: str) -> Callable[[Request], Any]:
    """Create a FastAPI dependency resolving from the container attached to the app.

    Requires ``attach_container`` to have been called on the serving application.

    Args:
        name: The dependency name to resolve.

    Returns:
        A callable that resolves the name from the request's application container.

    Example:
        >>> attach_container(app, container)
        >>> get_settings = create_request_dependency("Settings")
        >>>
        >>> @app.get("/settings")
        >>> async def read_settings(settings: dict = Depends(get_settings)):
        ...     return settings
    """

    def request_dependency(request: Request) -> Any:
        """Resolve from the application's container."""
        container = getattr(request.app.state, "di_container", None)
        if container is None:
            raise RuntimeError("Application does not have a DI container. Did you forget to call attach_container?")
        return container.get(name)

    return request_dependency


def inject_dependencies(container: IContainer, *names: str) -> Callable:
    """Decorator that injects named dependencies into an async endpoint function.

    Each name is resolved from the container on every call and passed as the
    keyword argument of the same name, unless the caller already supplied it.
    The injected parameters are hidden from the endpoint signature so FastAPI
    does not treat them as request parameters.

    Args:
        container: The DI container to resolve dependencies from.
        *names: Dependency names, each matching a parameter of the endpoint.

    Returns:
        A decorator function.

    Raises:
        TypeError: If a name does not match a parameter of the decorated function.

    Example:
        >>> @app.get("/users")
        >>> @inject_dependencies(container, "user_service")
        >>> async def list_users(user_service):
        ...     return await user_service.get_all()
    """

    def decorator(func: Callable) -> Callable:
        """Wrap the function with dependency injection logic."""
        signature = inspect.signature(func)
        missing = [name for name in names if name not in signature.parameters]
        if missing:
            raise TypeError(f"{func.__name__}() has no parameter named: {', '.join(missing)}")

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            """Resolve dependencies and call the original function."""
            for name in names:
                if name not in kwargs:
                    kwargs[name] = container.get(name)
            return await func(*args, **kwargs)

        wrapper.__signature__ = signature.replace(
            parameters=[param for param in signature.parameters.values() if param.name not in names]
        )
        return wrapper

    return decorator
