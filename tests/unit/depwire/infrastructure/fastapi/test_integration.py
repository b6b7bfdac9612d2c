"""Unit tests for FastAPI integration."""

import asyncio
import inspect
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI

from depwire.application.container import DependencyContainer
from depwire.domain.exceptions import ExternalModuleNotFoundError
from depwire.infrastructure.fastapi_integration.integration import (
    attach_container,
    create_fastapi_dependency,
    create_request_dependency,
    inject_dependencies,
)


class Repository:
    pass


@pytest.fixture
def container():
    container = DependencyContainer()
    container.register_class("Repository", Repository)
    container.register_factory("RequestId", lambda c: object())
    return container


class TestCreateFastAPIDependency:
    """Test cases for create_fastapi_dependency function."""

    def test_dependency_function_resolves_from_container(self, container):
        """Test that the dependency function resolves the name."""
        dependency_func = create_fastapi_dependency(container, "Repository")

        assert isinstance(dependency_func(), Repository)

    def test_dependency_function_returns_singleton_instance(self, container):
        """Test that singleton dependencies return same instance."""
        dependency_func = create_fastapi_dependency(container, "Repository")

        assert dependency_func() is dependency_func()

    def test_dependency_function_follows_factory(self, container):
        """Test that factories run on each call."""
        dependency_func = create_fastapi_dependency(container, "RequestId")

        assert dependency_func() is not dependency_func()

    def test_dependency_function_has_no_parameters(self, container):
        """Test that FastAPI sees no request parameters."""
        dependency_func = create_fastapi_dependency(container, "Repository")

        assert len(inspect.signature(dependency_func).parameters) == 0

    def test_dependency_function_propagates_errors(self):
        """Test that resolution errors surface when called."""
        dependency_func = create_fastapi_dependency(DependencyContainer(), "depwire_no_such_module_xyz")

        with pytest.raises(ExternalModuleNotFoundError):
            dependency_func()


class TestRequestDependency:
    """Test cases for attach_container and create_request_dependency."""

    def test_attach_container_sets_state(self, container):
        """Test that the container is stored on the app state."""
        app = FastAPI()
        attach_container(app, container)

        assert app.state.di_container is container

    def test_request_dependency_resolves_from_app(self, container):
        """Test resolving from the container of the request's app."""
        app = FastAPI()
        attach_container(app, container)
        request = MagicMock()
        request.app = app

        dependency = create_request_dependency("Repository")

        assert isinstance(dependency(request), Repository)

    def test_request_dependency_without_container_raises(self):
        """Test that a missing container gives a helpful error."""
        request = MagicMock()
        request.app = FastAPI()

        dependency = create_request_dependency("Repository")

        with pytest.raises(RuntimeError, match="attach_container"):
            dependency(request)


class TestInjectDependencies:
    """Test cases for the inject_dependencies decorator."""

    def test_injects_missing_arguments(self, container):
        """Test that named dependencies are injected as keyword arguments."""

        @inject_dependencies(container, "Repository")
        async def handler(item_id: int, Repository):
            return item_id, Repository

        item_id, repository = asyncio.run(handler(item_id=3))

        assert item_id == 3
        assert isinstance(repository, Repository)

    def test_caller_arguments_win(self, container):
        """Test that explicitly passed arguments are not replaced."""

        @inject_dependencies(container, "Repository")
        async def handler(Repository):
            return Repository

        assert asyncio.run(handler(Repository="explicit")) == "explicit"

    def test_injected_parameters_hidden_from_signature(self, container):
        """Test that FastAPI only sees the remaining parameters."""

        @inject_dependencies(container, "Repository")
        async def handler(item_id: int, Repository):
            return item_id

        assert list(inspect.signature(handler).parameters) == ["item_id"]
        assert handler.__name__ == "handler"

    def test_unknown_parameter_raises(self, container):
        """Test that names must match a parameter of the function."""
        with pytest.raises(TypeError, match="Repository"):

            @inject_dependencies(container, "Repository")
            async def handler(item_id: int):
                return item_id
