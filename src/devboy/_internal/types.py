"""Shared type aliases used across devboy modules."""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

# Route handler — ``handler(request, context)``, sync or async
Handler: TypeAlias = Callable[[Any, Any], Any]

# Raw ASGI types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
