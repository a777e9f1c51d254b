"""Devboy exception hierarchy.

Shared across the registry, dispatch builder, server, and CLI so every
module raises and catches the same types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from devboy.registry.model import Registry, RouteEntry


class DevboyError(Exception):
    """Base for all devboy-specific errors."""


class ConfigurationError(DevboyError):
    """Raised when devboy settings are invalid."""


class ValidationError(DevboyError):
    """Malformed route input: empty path, missing leading slash, bad method.

    Always recoverable: the caller fixes its input and tries again.
    """


class InvalidFunctionName(ValidationError):  # noqa: N818
    """Function name is empty, already taken, or unknown."""


class DuplicateRoute(ValidationError):  # noqa: N818
    """A route with the same path and method is already registered."""

    def __init__(self, path: str, method: str) -> None:
        self.path = path
        self.method = method
        super().__init__(f"Route {path} with method {method} already exists.")


class RegistryFormatError(DevboyError):
    """The registry document exists but cannot be parsed."""


class PersistenceError(DevboyError):
    """The registry document could not be written.

    ``registry`` holds the attempted (not yet durable) state when the
    failure happened during a route registration.  Callers should discard
    it and reload from the store.
    """

    def __init__(self, message: str, *, registry: Registry | None = None) -> None:
        self.registry = registry
        super().__init__(message)


class HandlerLoadError(DevboyError):
    """A registered handler could not be loaded; the dispatch build aborts."""

    def __init__(self, route: RouteEntry, function_name: str) -> None:
        self.route = route
        self.function_name = function_name
        super().__init__(
            f"Cannot load handler {route.handler_path!r} for "
            f"{route.method} {route.path} (function {function_name!r})"
        )
