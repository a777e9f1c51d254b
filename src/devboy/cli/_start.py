"""``devboy start`` — development server command.

Compiles the registry into a dispatch table and serves it.  A handler
that fails to load stops startup; nothing is served.
"""

import sys

from devboy.config import DevboyConfig
from devboy.errors import DevboyError, HandlerLoadError
from devboy.terminal import palette


def start_server(config: DevboyConfig) -> None:
    """Build the dev server for ``config.root`` and run it on host/port."""
    from devboy.server.dev import create_server, run_dev_server

    c = palette()
    print(f"{c.yellow}Starting Devboy development server...{c.reset}")
    try:
        server = create_server(config)
    except HandlerLoadError as exc:
        cause = f" ({exc.__cause__})" if exc.__cause__ is not None else ""
        print(f"Error: {exc}{cause}", file=sys.stderr)
        raise SystemExit(1) from exc
    except DevboyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(
        f"{c.green}Devboy development server is running on "
        f"http://{config.host}:{config.port}{c.reset}"
    )
    print(f"{c.blue}Available routes:{c.reset}")
    for endpoint in server.table:
        print(f"{c.gray}  {endpoint.route.method} {endpoint.route.path}{c.reset}")

    try:
        run_dev_server(server, config.host, config.port)
    except DevboyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
