"""Route registration — the one state transition driven from outside.

``add_route`` validates, resolves the target function, scaffolds the
handler, appends the route and persists, in that order.  Everything up to
the save happens on immutable values, so a rejected route leaves the
caller's registry exactly as it was.
"""

from __future__ import annotations

import logging
from pathlib import Path

from devboy.errors import DuplicateRoute, PersistenceError
from devboy.registry.checks import is_duplicate, validate_route
from devboy.registry.handlers import scaffold, synthesize
from devboy.registry.model import Method, Registry, RouteEntry
from devboy.registry.resolver import Selection, UseDefault, resolve
from devboy.registry.store import RegistryStore

logger = logging.getLogger("devboy.registry")


def add_route(
    registry: Registry,
    path: str,
    method: str | Method,
    selection: Selection | None = None,
    *,
    store: RegistryStore,
    root: str | Path,
    handler_filename: str = "index.py",
) -> Registry:
    """Register ``method path`` and return the updated, persisted registry.

    Args:
        registry: Current registry snapshot.  Never modified.
        path: Route path, must start with ``/``.
        method: GET, POST, PUT or DELETE (case-insensitive).
        selection: Target function; defaults to ``UseDefault()``.
        store: Where the updated registry is saved.
        root: Project root the handler file is scaffolded under.
        handler_filename: File name of the generated handler module.

    Raises:
        ValidationError: Malformed path or method.
        DuplicateRoute: The (path, method) pair is already registered.
        InvalidFunctionName: The selection names a bad function.
        PersistenceError: The handler or registry could not be written.
            ``exc.registry`` carries the attempted state; reload from the
            store instead of retrying with it.
    """
    parsed = validate_route(path, method)
    if is_duplicate(registry, path, parsed):
        raise DuplicateRoute(path, parsed.value)

    updated, function_name = resolve(registry, selection or UseDefault())

    route = RouteEntry(
        path=path,
        method=parsed,
        handler_path=synthesize(path, parsed, filename=handler_filename),
    )
    updated = updated.with_route(function_name, route)

    try:
        scaffold(root, route)
    except OSError as exc:
        msg = f"Cannot write handler {route.handler_path}: {exc}"
        raise PersistenceError(msg, registry=updated) from exc

    store.save(updated)
    logger.info("Registered %s %s -> %s (%s)", parsed, path, route.handler_path, function_name)
    return updated
