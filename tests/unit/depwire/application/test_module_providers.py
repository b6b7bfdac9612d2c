"""Unit tests for module providers."""

import json
import sys

import pytest

from depwire.application.module_providers import ImportlibModuleProvider, MappingModuleProvider
from depwire.domain import IModuleProvider


class TestImportlibModuleProvider:
    """Test cases for ImportlibModuleProvider."""

    def test_implements_interface(self):
        """Test that ImportlibModuleProvider implements IModuleProvider."""
        assert isinstance(ImportlibModuleProvider(), IModuleProvider)

    def test_exists_for_installed_module(self):
        """Test that an importable module exists."""
        assert ImportlibModuleProvider().exists("json") is True

    def test_exists_for_dotted_module(self):
        """Test that a dotted submodule exists."""
        assert ImportlibModuleProvider().exists("os.path") is True

    @pytest.mark.parametrize(
        "name",
        [
            "depwire_no_such_module_xyz",
            "socket.io",
            "-dog",
            ".dog",
            "missing_parent_pkg_xyz.child",
        ],
    )
    def test_exists_false_for_unresolvable_names(self, name):
        """Test that unresolvable or malformed names do not exist."""
        assert ImportlibModuleProvider().exists(name) is False

    def test_exists_does_not_execute_leaf_module(self):
        """Test that checking a dotted name only imports its parent package."""
        if "json.tool" in sys.modules:
            pytest.skip("json.tool already imported")

        assert ImportlibModuleProvider().exists("json.tool") is True
        assert "json.tool" not in sys.modules

    def test_load_returns_module(self):
        """Test that load imports and returns the module."""
        assert ImportlibModuleProvider().load("json") is json

    def test_load_missing_module_raises(self):
        """Test that loading a missing module raises ImportError."""
        with pytest.raises(ImportError):
            ImportlibModuleProvider().load("depwire_no_such_module_xyz")


class TestMappingModuleProvider:
    """Test cases for MappingModuleProvider."""

    def test_empty_provider(self):
        """Test that an empty provider resolves nothing."""
        assert MappingModuleProvider().exists("json") is False

    def test_exists_and_load(self):
        """Test that mapped names exist and load their value."""
        client = object()
        provider = MappingModuleProvider({"socket.io": client})

        assert provider.exists("socket.io") is True
        assert provider.exists("socketIo") is False
        assert provider.load("socket.io") is client

    def test_provider_copies_mapping(self):
        """Test that later changes to the source mapping are not seen."""
        modules = {}
        provider = MappingModuleProvider(modules)
        modules["late"] = 1

        assert provider.exists("late") is False

    def test_add(self):
        """Test adding a module after construction."""
        provider = MappingModuleProvider()
        provider.add("lodash", "lodash-module")

        assert provider.load("lodash") == "lodash-module"

    def test_load_missing_raises_key_error(self):
        """Test that loading an unknown name raises KeyError."""
        with pytest.raises(KeyError):
            MappingModuleProvider().load("missing")
