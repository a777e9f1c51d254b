"""ASGI dev server over a dispatch table.

The only component that touches raw ASGI directly.  Looks the request up
in the table, invokes the handler, and translates the outcome:
unmapped (method, path) -> 404, handler exception -> 500.
"""

import logging

from devboy._internal.invoke import invoke
from devboy._internal.types import Receive, Scope, Send
from devboy.dispatch.table import DispatchTable
from devboy.server.request import HandlerContext, Request
from devboy.server.response import json_response, send_response, to_response

logger = logging.getLogger("devboy.server")


class DevServer:
    """ASGI application serving one dispatch table.

    Usage::

        table = build(registry, FileHandlerLoader(root))
        server = DevServer(table)
        # hand ``server`` to any ASGI server, or to devboy.testing.TestClient
    """

    __slots__ = ("table",)

    def __init__(self, table: DispatchTable) -> None:
        self.table = table

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        request = await Request.from_asgi(scope, receive)
        endpoint = self.table.lookup(request.method, request.path)
        if endpoint is None:
            logger.debug("404 %s %s", request.method, request.path)
            await send_response(json_response({"error": "Not Found"}, status=404), send)
            return

        context = HandlerContext(function_name=endpoint.function_name, route=endpoint.route)
        try:
            result = await invoke(endpoint.handler, request, context)
            response = to_response(result)
        except Exception:
            logger.exception("Error in route %s %s", request.method, request.path)
            response = json_response({"error": "Internal Server Error"}, status=500)

        logger.info("%d %s %s", response.status, request.method, request.path)
        await send_response(response, send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
