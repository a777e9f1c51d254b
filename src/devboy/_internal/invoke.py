"""Invoke helper — call sync or async handlers uniformly.

Handler modules may define ``def handler`` or ``async def handler``.
The sync/async check lives here and nowhere else.

Usage::

    from devboy._internal.invoke import invoke

    result = await invoke(endpoint.handler, request, context)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Plain functions run in a worker thread via ``anyio.to_thread`` so a
    blocking handler does not stall the event loop.
    """
    if inspect.iscoroutinefunction(handler):
        return await handler(*args, **kwargs)

    result = await anyio.to_thread.run_sync(functools.partial(handler, *args, **kwargs))
    if inspect.isawaitable(result):
        result = await result
    return result
