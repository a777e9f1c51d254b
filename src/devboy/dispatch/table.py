"""Dispatch table — (method, path) -> loaded handler, compiled from a registry.

The table is built once per serving session and never changes afterwards.
A single handler that fails to load aborts the whole build: there is no
partially-built table to serve.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from devboy._internal.types import Handler
from devboy.dispatch.loader import HandlerLoader
from devboy.errors import HandlerLoadError
from devboy.registry.model import Registry, RouteEntry

logger = logging.getLogger("devboy.dispatch")


@dataclass(frozen=True, slots=True)
class Endpoint:
    """A route with its loaded handler and the function that owns it."""

    route: RouteEntry
    function_name: str
    handler: Handler


@dataclass(frozen=True, slots=True)
class DispatchTable:
    """Immutable ``(method, path) -> Endpoint`` mapping.

    Unknown pairs are reported by ``lookup`` returning ``None``; turning
    that into a 404 is the server's job.
    """

    endpoints: Mapping[tuple[str, str], Endpoint]

    def lookup(self, method: str, path: str) -> Endpoint | None:
        return self.endpoints.get((method.upper(), path))

    def __contains__(self, key: object) -> bool:
        return key in self.endpoints

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self.endpoints.values())

    def __len__(self) -> int:
        return len(self.endpoints)


def build(registry: Registry, loader: HandlerLoader) -> DispatchTable:
    """Load every registered handler and return the compiled table.

    Routes are visited function by function in registration order.

    Raises:
        HandlerLoadError: The first route whose handler cannot be loaded.
            The original exception is chained as ``__cause__``.
    """
    endpoints: dict[tuple[str, str], Endpoint] = {}
    for function, route in registry.routes():
        try:
            handler = loader.load(route.handler_path)
        except Exception as exc:
            logger.error(
                "Failed to load %s for %s %s: %s",
                route.handler_path, route.method, route.path, exc,
            )
            raise HandlerLoadError(route, function.name) from exc
        key = (route.method.value, route.path)
        endpoints[key] = Endpoint(route=route, function_name=function.name, handler=handler)

    logger.debug("Built dispatch table with %d endpoints", len(endpoints))
    return DispatchTable(endpoints)
