"""``devboy routes`` — list registered routes.

Prints a table of METHOD, PATH, FUNCTION and HANDLER for every route in
the registry, in registration order.
"""

import sys

from devboy.config import DevboyConfig
from devboy.errors import DevboyError
from devboy.registry.store import RegistryStore
from devboy.terminal import format_route_table


def run_routes(config: DevboyConfig) -> None:
    """Print the route table for ``config.root``."""
    try:
        registry = RegistryStore(config.registry_path).load()
    except DevboyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(format_route_table(registry))
