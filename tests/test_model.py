"""Tests for devboy.registry.model — registry value types and document form."""

import pytest

from devboy.errors import RegistryFormatError, ValidationError
from devboy.registry.model import (
    DEFAULT_FUNCTION,
    FunctionEntry,
    Method,
    Registry,
    RouteEntry,
)


def _route(path: str = "/users", method: Method = Method.GET) -> RouteEntry:
    return RouteEntry(path=path, method=method, handler_path=f"api{path}/{method.lower()}/index.py")


class TestMethod:
    def test_parse_is_case_insensitive(self) -> None:
        assert Method.parse("get") is Method.GET
        assert Method.parse(" Delete ") is Method.DELETE

    def test_parse_passes_enum_through(self) -> None:
        assert Method.parse(Method.PUT) is Method.PUT

    def test_parse_rejects_unknown(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Method.parse("PATCH")
        assert "PATCH" in str(exc_info.value)
        assert "GET, POST, PUT, DELETE" in str(exc_info.value)

    def test_compares_equal_to_plain_string(self) -> None:
        assert Method.POST == "POST"
        assert str(Method.POST) == "POST"


class TestRegistryDefaults:
    def test_default_has_only_api(self) -> None:
        registry = Registry.default()
        assert registry.names == (DEFAULT_FUNCTION,)
        assert registry[DEFAULT_FUNCTION].handler_path == "index.py"
        assert registry[DEFAULT_FUNCTION].routes == ()

    def test_default_key_inserted_when_missing(self) -> None:
        registry = Registry({"jobs": FunctionEntry("jobs", "jobs.py")})
        assert registry.names == ("api", "jobs")

    def test_existing_default_entry_kept(self) -> None:
        api = FunctionEntry("api", "main.py", (_route(),))
        registry = Registry({"api": api})
        assert registry["api"] is api


class TestRegistryTransformations:
    def test_with_route_returns_new_registry(self) -> None:
        original = Registry.default()
        updated = original.with_route("api", _route())

        assert original["api"].routes == ()
        assert updated["api"].routes == (_route(),)

    def test_with_function_preserves_order(self) -> None:
        registry = (
            Registry.default()
            .with_function(FunctionEntry("jobs", "jobs.py"))
            .with_function(FunctionEntry("auth", "auth.py"))
        )
        assert registry.names == ("api", "jobs", "auth")

    def test_routes_yield_in_registration_order(self) -> None:
        first = _route("/a")
        second = _route("/b", Method.POST)
        third = _route("/c")
        registry = (
            Registry.default()
            .with_route("api", first)
            .with_function(FunctionEntry("jobs", "jobs.py", (second,)))
            .with_route("api", third)
        )
        pairs = [(function.name, route) for function, route in registry.routes()]
        assert pairs == [("api", first), ("api", third), ("jobs", second)]

    def test_membership_and_len(self) -> None:
        registry = Registry.default().with_function(FunctionEntry("jobs", "jobs.py"))
        assert "jobs" in registry
        assert "nope" not in registry
        assert len(registry) == 2


class TestRegistryDocument:
    def test_round_trip_shape(self) -> None:
        registry = Registry.default().with_function(
            FunctionEntry("jobs", "jobs.py", (_route("/a", Method.POST),))
        )
        assert registry.to_document() == {
            "api": {"handlerPath": "index.py", "routes": []},
            "jobs": {
                "handlerPath": "jobs.py",
                "routes": [{"path": "/a", "method": "POST", "handler": "api/a/post/index.py"}],
            },
        }
        assert Registry.from_document(registry.to_document()) == registry

    def test_accepts_legacy_handler_key(self) -> None:
        registry = Registry.from_document({"api": {"handler": "index.js", "routes": []}})
        assert registry["api"].handler_path == "index.js"

    def test_rejects_non_object(self) -> None:
        with pytest.raises(RegistryFormatError):
            Registry.from_document([])

    def test_rejects_route_missing_field(self) -> None:
        with pytest.raises(RegistryFormatError) as exc_info:
            Registry.from_document({"api": {"routes": [{"path": "/a", "method": "GET"}]}})
        assert "handler" in str(exc_info.value)

    def test_rejects_unknown_method(self) -> None:
        with pytest.raises(RegistryFormatError):
            Registry.from_document(
                {"api": {"routes": [{"path": "/a", "method": "TRACE", "handler": "x.py"}]}}
            )

    def test_rejects_duplicate_routes_across_functions(self) -> None:
        route = {"path": "/a", "method": "GET", "handler": "api/a/get/index.py"}
        with pytest.raises(RegistryFormatError) as exc_info:
            Registry.from_document(
                {
                    "api": {"handlerPath": "index.py", "routes": [route]},
                    "jobs": {"handlerPath": "jobs.py", "routes": [route]},
                }
            )
        assert "registered twice" in str(exc_info.value)

    @pytest.mark.parametrize("path", ["users", "", "/../escape"])
    def test_rejects_malformed_route_path(self, path: str) -> None:
        with pytest.raises(RegistryFormatError) as exc_info:
            Registry.from_document(
                {"api": {"routes": [{"path": path, "method": "GET", "handler": "x.py"}]}}
            )
        assert "'api'" in str(exc_info.value)

    def test_default_function_without_handler_path(self) -> None:
        registry = Registry.from_document({"api": {"routes": []}, "jobs": {"routes": []}})
        assert registry["api"].handler_path == "index.py"
        assert registry["jobs"].handler_path == "jobs.py"
