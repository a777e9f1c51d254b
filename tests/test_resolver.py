"""Tests for devboy.registry.resolver — choosing the target function."""

import pytest

from devboy.errors import InvalidFunctionName, ValidationError
from devboy.registry.model import FunctionEntry, Registry
from devboy.registry.resolver import (
    CreateNew,
    UseDefault,
    UseExisting,
    resolve,
)


def _registry() -> Registry:
    return Registry.default().with_function(FunctionEntry("jobs", "jobs.py"))


class TestResolve:
    def test_default(self) -> None:
        registry = _registry()
        updated, name = resolve(registry, UseDefault())
        assert name == "api"
        assert updated is registry

    def test_existing(self) -> None:
        registry = _registry()
        updated, name = resolve(registry, UseExisting("jobs"))
        assert name == "jobs"
        assert updated is registry

    def test_existing_unknown_name(self) -> None:
        with pytest.raises(InvalidFunctionName) as exc_info:
            resolve(_registry(), UseExisting("auth"))
        assert "auth" in str(exc_info.value)

    def test_create_new_inserts_entry(self) -> None:
        registry = _registry()
        updated, name = resolve(registry, CreateNew("auth"))
        assert name == "auth"
        assert updated["auth"] == FunctionEntry("auth", "auth.py", ())
        assert "auth" not in registry

    def test_create_new_trims_name(self) -> None:
        updated, name = resolve(_registry(), CreateNew("  auth \n"))
        assert name == "auth"
        assert "auth" in updated

    @pytest.mark.parametrize("name", ["", "   "])
    def test_create_new_empty_name(self, name: str) -> None:
        with pytest.raises(InvalidFunctionName) as exc_info:
            resolve(_registry(), CreateNew(name))
        assert "cannot be empty" in str(exc_info.value)

    @pytest.mark.parametrize("name", ["jobs", "api", " jobs "])
    def test_create_new_collision(self, name: str) -> None:
        registry = _registry()
        with pytest.raises(InvalidFunctionName) as exc_info:
            resolve(registry, CreateNew(name))
        assert "already exists" in str(exc_info.value)
        assert registry.names == ("api", "jobs")

    def test_invalid_function_name_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            resolve(_registry(), CreateNew(""))

    def test_unknown_selection_type(self) -> None:
        with pytest.raises(TypeError):
            resolve(_registry(), "jobs")  # type: ignore[arg-type]
