"""Tests for devboy.registry.checks — route shape, uniqueness, deployability."""

from pathlib import Path

import pytest

from devboy.errors import ValidationError
from devboy.registry.checks import Violation, is_duplicate, validate, validate_route
from devboy.registry.model import FunctionEntry, Method, Registry, RouteEntry


def _registry() -> Registry:
    return (
        Registry.default()
        .with_route("api", RouteEntry("/users", Method.GET, "api/users/get/index.py"))
        .with_function(
            FunctionEntry("jobs", "jobs.py", (RouteEntry("/jobs", Method.POST, "api/jobs/post/index.py"),))
        )
    )


class TestValidateRoute:
    def test_returns_parsed_method(self) -> None:
        assert validate_route("/users", "get") is Method.GET

    @pytest.mark.parametrize("path", ["", "   "])
    def test_empty_path(self, path: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_route(path, "GET")
        assert "cannot be empty" in str(exc_info.value)

    def test_missing_leading_slash(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_route("users", "GET")
        assert 'must start with a "/"' in str(exc_info.value)

    @pytest.mark.parametrize("path", ["/../../etc/evil", "/users/..", "/./users"])
    def test_dot_segments_rejected(self, path: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_route(path, "GET")
        assert "segments" in str(exc_info.value)

    def test_dots_inside_segment_allowed(self) -> None:
        assert validate_route("/files/v1.2", "GET") is Method.GET

    def test_bad_method(self) -> None:
        with pytest.raises(ValidationError):
            validate_route("/users", "PATCH")


class TestIsDuplicate:
    def test_match_in_default_function(self) -> None:
        assert is_duplicate(_registry(), "/users", Method.GET) is True

    def test_match_in_other_function(self) -> None:
        assert is_duplicate(_registry(), "/jobs", "POST") is True

    def test_same_path_other_method(self) -> None:
        assert is_duplicate(_registry(), "/users", Method.POST) is False

    def test_trailing_slash_is_distinct(self) -> None:
        assert is_duplicate(_registry(), "/users/", Method.GET) is False

    def test_path_comparison_is_case_sensitive(self) -> None:
        assert is_duplicate(_registry(), "/Users", Method.GET) is False

    def test_empty_registry(self) -> None:
        assert is_duplicate(Registry.default(), "/users", Method.GET) is False


class TestValidate:
    def test_every_missing_handler_reported(self, tmp_path: Path) -> None:
        violations = validate(_registry(), tmp_path)
        assert violations == [
            Violation("/users", Method.GET, "api/users/get/index.py", "api"),
            Violation("/jobs", Method.POST, "api/jobs/post/index.py", "jobs"),
        ]

    def test_clean_when_all_handlers_exist(self, tmp_path: Path) -> None:
        for handler in ("api/users/get/index.py", "api/jobs/post/index.py"):
            (tmp_path / handler).parent.mkdir(parents=True)
            (tmp_path / handler).write_text("def handler(request, context): ...\n")
        assert validate(_registry(), tmp_path) == []

    def test_partial(self, tmp_path: Path) -> None:
        handler = tmp_path / "api/users/get/index.py"
        handler.parent.mkdir(parents=True)
        handler.write_text("")
        violations = validate(_registry(), tmp_path)
        assert [v.path for v in violations] == ["/jobs"]

    def test_recomputed_on_every_call(self, tmp_path: Path) -> None:
        registry = _registry()
        assert len(validate(registry, tmp_path)) == 2
        handler = tmp_path / "api/jobs/post/index.py"
        handler.parent.mkdir(parents=True)
        handler.write_text("")
        assert len(validate(registry, tmp_path)) == 1

    def test_directory_is_not_a_handler(self, tmp_path: Path) -> None:
        (tmp_path / "api/users/get/index.py").mkdir(parents=True)
        paths = [v.path for v in validate(_registry(), tmp_path)]
        assert "/users" in paths

    def test_violation_message(self) -> None:
        violation = Violation("/users", Method.GET, "api/users/get/index.py", "api")
        assert violation.message == "Handler not found for route: /users (GET)"
