"""Development server.

Builds a ``DevServer`` from the project's registry and serves it with a
single-worker pounce server.
"""

from __future__ import annotations

import logging

from devboy.config import DevboyConfig
from devboy.dispatch.loader import FileHandlerLoader
from devboy.dispatch.table import build
from devboy.errors import ConfigurationError
from devboy.registry.store import RegistryStore
from devboy.server.app import DevServer

logger = logging.getLogger("devboy.server")


def create_server(config: DevboyConfig) -> DevServer:
    """Load the registry under ``config.root`` and compile it for serving.

    Raises ``HandlerLoadError`` if any registered handler cannot be loaded;
    no server is created in that case.
    """
    registry = RegistryStore(config.registry_path).load()
    table = build(registry, FileHandlerLoader(config.root))
    return DevServer(table)


def run_dev_server(server: DevServer, host: str, port: int) -> None:
    """Serve *server* with pounce until interrupted.

    Pounce's ``run()`` takes an import string, but the dev server is a
    live object built from the registry, so ``pounce.Server`` is used
    directly with the ASGI callable.  Reload is off: the dispatch table is
    rebuilt only when the server restarts.

    Raises ``ConfigurationError`` if pounce is not installed.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError:
        msg = (
            "The dev server requires the 'pounce' package. "
            "Install it with: pip install devboy[serve]"
        )
        raise ConfigurationError(msg) from None

    config = ServerConfig(host=host, port=port, workers=1, reload=False)
    logger.info("Serving %d routes on http://%s:%d", len(server.table), host, port)
    Server(config, server).run()
