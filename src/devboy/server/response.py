"""Responses — handler results translated into status, headers and body.

Handlers return plain values.  ``to_response`` maps them:

- a mapping with ``statusCode``: Lambda-style proxy result
  (``statusCode``, optional ``headers``, ``body``),
- ``None``: 204 with an empty body,
- a ``Response``: sent as is,
- anything else: JSON-encoded with status 200.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from devboy._internal.types import Send

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response as the dev server sends it."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = JSON_CONTENT_TYPE
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")

    @property
    def text(self) -> str:
        return self.body_bytes.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.body_bytes)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        lower = name.lower()
        if lower == "content-type":
            return self.content_type
        for key, value in self.headers:
            if key.lower() == lower:
                return value
        return default


def json_response(payload: Any, status: int = 200) -> Response:
    return Response(body=json.dumps(payload), status=status)


def to_response(result: Any) -> Response:
    """Translate a handler return value into a Response."""
    if isinstance(result, Response):
        _check_headers((("content-type", result.content_type), *result.headers))
        return result
    if result is None:
        return Response(status=204)
    if isinstance(result, Mapping) and "statusCode" in result:
        return _proxy_response(result)
    return json_response(result)


def _proxy_response(result: Mapping[str, Any]) -> Response:
    status = int(result["statusCode"])
    headers = {str(k): str(v) for k, v in (result.get("headers") or {}).items()}
    _check_headers(headers.items())

    content_type = JSON_CONTENT_TYPE
    for name in list(headers):
        if name.lower() == "content-type":
            content_type = headers.pop(name)

    body = result.get("body", "")
    if body is None:
        body = ""
    elif not isinstance(body, str | bytes):
        body = json.dumps(body)
    return Response(
        body=body,
        status=status,
        content_type=content_type,
        headers=tuple(headers.items()),
    )


def _check_headers(headers: Iterable[tuple[str, str]]) -> None:
    """Raise ``ValueError`` for a header that cannot go on the wire."""
    for name, value in headers:
        try:
            name.encode("latin-1")
            value.encode("latin-1")
        except UnicodeEncodeError as exc:
            msg = f"Header {name!r}: {value!r} is not latin-1 encodable"
            raise ValueError(msg) from exc


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: Response, send: Send) -> None:
    """Translate a Response into ASGI send() calls."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    body = response.body_bytes if _body_allowed(response.status) else b""

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
