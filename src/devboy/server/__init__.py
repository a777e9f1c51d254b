"""Local dev server — ASGI app, request/response types, and pounce launcher."""

from devboy.server.app import DevServer
from devboy.server.request import HandlerContext, Request
from devboy.server.response import Response

__all__ = ["DevServer", "HandlerContext", "Request", "Response"]
