"""Dispatch — compiles a registry into a live request-dispatch table."""

from devboy.dispatch.loader import FileHandlerLoader, HandlerLoader
from devboy.dispatch.table import DispatchTable, Endpoint, build

__all__ = ["DispatchTable", "Endpoint", "FileHandlerLoader", "HandlerLoader", "build"]
