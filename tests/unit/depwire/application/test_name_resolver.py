"""Unit tests for name casing helpers."""

import pytest

from depwire.application.name_resolver import candidate_names, to_dash_case, to_dot_case


class TestToDashCase:
    """Test cases for to_dash_case."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("socketIo", "socket-io"),
            ("appleOrange2", "apple-orange-2"),
            ("socketIO", "socket-io"),
            ("lodash", "lodash"),
            ("Dog", "-dog"),
            ("abc123def", "abc-123def"),
            ("", ""),
        ],
    )
    def test_to_dash_case(self, name, expected):
        """Test that uppercase and digit runs become a dash plus lowercase run."""
        assert to_dash_case(name) == expected

    def test_to_dash_case_keeps_existing_dashes(self):
        """Test that names already in dash case are unchanged."""
        assert to_dash_case("socket-io") == "socket-io"

    def test_to_dash_case_is_deterministic(self):
        """Test that repeated calls give the same result."""
        assert to_dash_case("fooBarBaz") == to_dash_case("fooBarBaz") == "foo-bar-baz"


class TestToDotCase:
    """Test cases for to_dot_case."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("socketIo", "socket.io"),
            ("appleOrange2", "apple.orange.2"),
            ("lodash", "lodash"),
            ("my-package", "my.package"),
        ],
    )
    def test_to_dot_case(self, name, expected):
        """Test that dashes of the dash-cased name become dots."""
        assert to_dot_case(name) == expected


class TestCandidateNames:
    """Test cases for candidate_names."""

    def test_candidate_names_order(self):
        """Test that candidates are verbatim, dash case, then dot case."""
        assert candidate_names("socketIo") == ["socketIo", "socket-io", "socket.io"]

    def test_candidate_names_drops_repeats(self):
        """Test that identical variants are tried once."""
        assert candidate_names("lodash") == ["lodash"]

    def test_candidate_names_two_variants(self):
        """Test a name whose dash and dot forms are equal."""
        assert candidate_names("ioRedis") == ["ioRedis", "io-redis", "io.redis"]
        assert candidate_names("pathLib") == ["pathLib", "path-lib", "path.lib"]
        assert candidate_names("my-lib") == ["my-lib", "my.lib"]
