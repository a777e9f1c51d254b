"""Registry checks — route shape, uniqueness, and deployability.

None of these functions touch the registry; they only read it.

Usage::

    method = validate_route("/users", "get")
    if is_duplicate(registry, "/users", method):
        ...
    for violation in validate(registry, root):
        print(violation.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from devboy.registry.model import Method, Registry, check_path


@dataclass(frozen=True, slots=True)
class Violation:
    """A registered route whose handler file is missing."""

    path: str
    method: Method
    handler_path: str
    function_name: str

    @property
    def message(self) -> str:
        return f"Handler not found for route: {self.path} ({self.method})"


def validate_route(path: str, method: str | Method) -> Method:
    """Check the shape of a route before it goes anywhere near the registry.

    Returns the parsed method.  Raises ``ValidationError`` for an empty
    path, a path without a leading ``/``, a ``.``/``..`` segment, or an
    unsupported method.
    """
    check_path(path)
    return Method.parse(method)


def is_duplicate(registry: Registry, path: str, method: str | Method) -> bool:
    """True if any function already has a route with this exact path and method.

    Comparison is exact: ``/users`` and ``/users/`` are different paths.
    """
    return any(
        route.path == path and route.method == method
        for _, route in registry.routes()
    )


def validate(registry: Registry, root: str | Path) -> list[Violation]:
    """Return one violation per route whose handler file is absent under *root*.

    An empty list means the registry is deployable.
    """
    base = Path(root)
    return [
        Violation(
            path=route.path,
            method=route.method,
            handler_path=route.handler_path,
            function_name=function.name,
        )
        for function, route in registry.routes()
        if not (base / route.handler_path).is_file()
    ]
