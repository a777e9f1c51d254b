"""Handler loaders — turn a registered handler path into a callable.

The dispatch builder only knows the ``HandlerLoader`` protocol.  Serving
uses ``FileHandlerLoader``; tests pass in-memory loaders instead.
"""

import importlib.util
import re
import sys
from pathlib import Path
from typing import Protocol

from devboy._internal.types import Handler

_MODULE_PREFIX = "devboy_handlers"


class HandlerLoader(Protocol):
    """Anything that can resolve a handler path to ``handler(request, context)``."""

    def load(self, handler_path: str) -> Handler: ...


def module_name_for(handler_path: str) -> str:
    """Stable, importable module name for a handler file.

    ``api/users/get/index.py`` -> ``devboy_handlers.api.users.get.index``
    """
    stem = handler_path.removesuffix(".py")
    parts = [re.sub(r"\W", "_", part) for part in stem.split("/") if part]
    return ".".join([_MODULE_PREFIX, *parts])


class FileHandlerLoader:
    """Imports handler modules from files under a project root.

    Each file is executed as a fresh module and its *attribute* (default
    ``handler``) is returned.  Raises ``FileNotFoundError`` when the file is
    missing, ``ImportError`` when it cannot be imported, and ``TypeError``
    when the attribute is absent or not callable.  Errors raised while
    executing the module propagate unchanged.
    """

    __slots__ = ("attribute", "root")

    def __init__(self, root: str | Path, *, attribute: str = "handler") -> None:
        self.root = Path(root)
        self.attribute = attribute

    def load(self, handler_path: str) -> Handler:
        file_path = self.root / handler_path
        if not file_path.is_file():
            msg = f"Handler file not found: {file_path}"
            raise FileNotFoundError(msg)

        name = module_name_for(handler_path)
        spec = importlib.util.spec_from_file_location(name, file_path)
        if spec is None or spec.loader is None:
            msg = f"Cannot import handler file {file_path}"
            raise ImportError(msg)

        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(name, None)
            raise

        handler = getattr(module, self.attribute, None)
        if handler is None or not callable(handler):
            msg = f"{file_path} does not define a callable {self.attribute!r}"
            raise TypeError(msg)
        return handler
