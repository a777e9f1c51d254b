"""Registry value types — Method, RouteEntry, FunctionEntry, Registry.

Every type here is frozen.  Operations that change the registry return a
new ``Registry`` and leave the original untouched, so a snapshot handed to
the dispatch builder or the validator can never shift underneath it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from devboy.errors import RegistryFormatError, ValidationError

DEFAULT_FUNCTION = "api"
DEFAULT_HANDLER = "index.py"


class Method(StrEnum):
    """HTTP methods a route may be registered for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: str | Method) -> Method:
        """Parse a method name case-insensitively.

        Raises ``ValidationError`` for anything outside GET/POST/PUT/DELETE.
        """
        if isinstance(value, Method):
            return value
        try:
            return cls(value.strip().upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            msg = f"Unsupported HTTP method {value!r}. Choose one of: {allowed}"
            raise ValidationError(msg) from None


def check_path(path: str) -> str:
    """Return *path* if it is a usable route path.

    Raises ``ValidationError`` for an empty path, a path without a leading
    ``/``, or one with a ``.`` or ``..`` segment, which would place the
    handler file outside the project's ``api/`` tree.
    """
    if not path or not path.strip():
        msg = "Route path cannot be empty. Please enter a valid path."
        raise ValidationError(msg)
    if not path.startswith("/"):
        msg = 'Route path must start with a "/". Please enter a valid path.'
        raise ValidationError(msg)
    if any(segment in {".", ".."} for segment in path.split("/")):
        msg = f"Route path {path!r} cannot contain '.' or '..' segments."
        raise ValidationError(msg)
    return path


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One (path, method) binding to a handler file."""

    path: str
    method: Method
    handler_path: str

    def to_document(self) -> dict[str, str]:
        return {"path": self.path, "method": self.method.value, "handler": self.handler_path}


@dataclass(frozen=True, slots=True)
class FunctionEntry:
    """A named group of routes deployed as one backend function."""

    name: str
    handler_path: str
    routes: tuple[RouteEntry, ...] = ()

    def with_route(self, route: RouteEntry) -> FunctionEntry:
        """Return a copy with *route* appended."""
        return replace(self, routes=(*self.routes, route))

    def to_document(self) -> dict[str, Any]:
        return {
            "handlerPath": self.handler_path,
            "routes": [route.to_document() for route in self.routes],
        }


@dataclass(frozen=True, slots=True)
class Registry:
    """Function name -> FunctionEntry, with the default ``"api"`` key always present.

    Build one with ``Registry.default()`` or ``Registry.from_document()``;
    the constructor inserts the default entry when it is missing.
    """

    functions: Mapping[str, FunctionEntry]

    def __post_init__(self) -> None:
        functions = dict(self.functions)
        if DEFAULT_FUNCTION not in functions:
            functions = {
                DEFAULT_FUNCTION: FunctionEntry(DEFAULT_FUNCTION, DEFAULT_HANDLER),
                **functions,
            }
        object.__setattr__(self, "functions", functions)

    @classmethod
    def default(cls) -> Registry:
        """An empty registry holding only the default function."""
        return cls({})

    # -- Mapping-style access --

    def __contains__(self, name: object) -> bool:
        return name in self.functions

    def __getitem__(self, name: str) -> FunctionEntry:
        return self.functions[name]

    def __iter__(self) -> Iterator[FunctionEntry]:
        return iter(self.functions.values())

    def __len__(self) -> int:
        return len(self.functions)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.functions)

    def routes(self) -> Iterator[tuple[FunctionEntry, RouteEntry]]:
        """Yield every (function, route) pair in registration order."""
        for function in self.functions.values():
            for route in function.routes:
                yield function, route

    # -- Transformations --

    def with_function(self, function: FunctionEntry) -> Registry:
        """Return a registry with *function* inserted or replaced."""
        return Registry({**self.functions, function.name: function})

    def with_route(self, name: str, route: RouteEntry) -> Registry:
        """Return a registry with *route* appended to function *name*."""
        return self.with_function(self.functions[name].with_route(route))

    # -- Document form --

    def to_document(self) -> dict[str, Any]:
        return {name: function.to_document() for name, function in self.functions.items()}

    @classmethod
    def from_document(cls, document: object) -> Registry:
        """Parse the persisted ``{name: {handlerPath, routes}}`` structure.

        Raises ``RegistryFormatError`` when the shape is wrong.
        """
        if not isinstance(document, dict):
            msg = f"Registry document must be an object, got {type(document).__name__}"
            raise RegistryFormatError(msg)

        functions: dict[str, FunctionEntry] = {}
        seen: dict[tuple[str, Method], str] = {}
        for name, raw in document.items():
            if not isinstance(name, str) or not name.strip():
                msg = f"Invalid function name {name!r} in registry document"
                raise RegistryFormatError(msg)
            if not isinstance(raw, dict):
                msg = f"Function {name!r} must be an object"
                raise RegistryFormatError(msg)
            default_handler = DEFAULT_HANDLER if name == DEFAULT_FUNCTION else f"{name}.py"
            handler_path = raw.get("handlerPath", raw.get("handler", default_handler))
            raw_routes = raw.get("routes", [])
            if not isinstance(raw_routes, list):
                msg = f"Function {name!r}: 'routes' must be a list"
                raise RegistryFormatError(msg)
            routes = tuple(_parse_route(name, item) for item in raw_routes)
            for route in routes:
                key = (route.path, route.method)
                if key in seen:
                    msg = (
                        f"Route {route.method} {route.path} is registered twice "
                        f"(functions {seen[key]!r} and {name!r})"
                    )
                    raise RegistryFormatError(msg)
                seen[key] = name
            functions[name] = FunctionEntry(name, str(handler_path), routes)
        return cls(functions)


def _parse_route(function_name: str, raw: object) -> RouteEntry:
    if not isinstance(raw, dict):
        msg = f"Function {function_name!r}: every route must be an object"
        raise RegistryFormatError(msg)
    try:
        path = raw["path"]
        method = raw["method"]
        handler = raw["handler"]
    except KeyError as exc:
        msg = f"Function {function_name!r}: route is missing {exc.args[0]!r}"
        raise RegistryFormatError(msg) from exc
    try:
        checked = check_path(str(path))
        parsed = Method.parse(str(method))
    except ValidationError as exc:
        raise RegistryFormatError(f"Function {function_name!r}: {exc}") from exc
    return RouteEntry(path=checked, method=parsed, handler_path=str(handler))
