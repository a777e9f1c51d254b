"""Request and context objects handed to route handlers.

Both are frozen.  The request body is read in full before the handler
runs, so sync handlers can use it without awaiting anything.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl

from devboy._internal.types import Receive, Scope
from devboy.registry.model import RouteEntry


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Header names are lower-cased.  Repeated query keys keep the last value.
    """

    method: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    query: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    def json(self) -> Any:
        """Parse the body as JSON; an empty body gives ``None``."""
        if not self.body:
            return None
        return json.loads(self.body)

    @classmethod
    async def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Build a Request from an ASGI HTTP scope, draining the body."""
        chunks: list[bytes] = []
        while True:
            message = await receive()
            if message["type"] != "http.request":
                break
            chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                break

        headers = {
            name.decode("latin-1").lower(): value.decode("latin-1")
            for name, value in scope.get("headers", ())
        }
        query_string = scope.get("query_string", b"").decode("latin-1")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=headers,
            query=dict(parse_qsl(query_string, keep_blank_values=True)),
            body=b"".join(chunks),
        )


@dataclass(frozen=True, slots=True)
class HandlerContext:
    """What a handler knows about where it was registered."""

    function_name: str
    route: RouteEntry

    @property
    def handler_path(self) -> str:
        return self.route.handler_path
