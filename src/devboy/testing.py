"""Async test client for devboy dev servers.

Drives a ``DevServer`` through its ASGI callable in-process and hands back
the ``Response`` type the server itself produces.
"""

from __future__ import annotations

import json as json_module
from typing import Any

from devboy.server.app import DevServer
from devboy.server.response import JSON_CONTENT_TYPE, Response


class TestClient:
    """Async test client for a ``DevServer``.

    Usage::

        async with TestClient(server) as client:
            response = await client.get("/users")
            assert response.status == 200
    """

    __test__ = False
    __slots__ = ("server",)

    def __init__(self, server: DevServer) -> None:
        self.server = server

    async def __aenter__(self) -> TestClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        pass

    async def get(self, path: str) -> Response:
        return await self.request("GET", path)

    async def post(self, path: str, *, json: object = None) -> Response:
        if json is None:
            return await self.request("POST", path)
        return await self.request(
            "POST",
            path,
            headers={"content-type": JSON_CONTENT_TYPE},
            body=json_module.dumps(json).encode("utf-8"),
        )

    async def put(self, path: str, *, body: bytes = b"") -> Response:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> Response:
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes = b"",
    ) -> Response:
        """Send one request and collect the ASGI response messages."""
        path_part, _, query = path.partition("?")
        scope: dict[str, Any] = {
            "type": "http",
            "method": method.upper(),
            "path": path_part,
            "query_string": query.encode("latin-1"),
            "headers": [
                (name.lower().encode("latin-1"), value.encode("latin-1"))
                for name, value in (headers or {}).items()
            ],
        }
        messages = [{"type": "http.request", "body": body, "more_body": False}]
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return messages.pop(0) if messages else {"type": "http.disconnect"}

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await self.server(scope, receive, send)
        return _collect(sent)


def _collect(messages: list[dict[str, Any]]) -> Response:
    start = next(m for m in messages if m["type"] == "http.response.start")
    body = b"".join(m.get("body", b"") for m in messages if m["type"] == "http.response.body")

    content_type = JSON_CONTENT_TYPE
    headers: list[tuple[str, str]] = []
    for raw_name, raw_value in start.get("headers", []):
        name, value = raw_name.decode("latin-1"), raw_value.decode("latin-1")
        if name == "content-type":
            content_type = value
        elif name != "content-length":
            headers.append((name, value))

    return Response(
        body=body,
        status=start["status"],
        content_type=content_type,
        headers=tuple(headers),
    )
