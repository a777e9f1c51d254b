"""``devboy new:route`` — register a route and scaffold its handler.

One invocation registers one route.  Rejected input (bad path or method,
duplicate route, bad function name) exits with code 1 and leaves the
registry document untouched.
"""

import argparse
import sys

from devboy.config import DevboyConfig
from devboy.errors import DevboyError
from devboy.registry.model import DEFAULT_FUNCTION, Method
from devboy.registry.registrar import add_route
from devboy.registry.resolver import CreateNew, Selection, UseDefault, UseExisting
from devboy.registry.store import RegistryStore
from devboy.terminal import palette


def _selection(args: argparse.Namespace) -> Selection:
    if args.new_function is not None:
        return CreateNew(args.new_function)
    if args.function is not None and args.function != DEFAULT_FUNCTION:
        return UseExisting(args.function)
    return UseDefault()


def create_route(args: argparse.Namespace, config: DevboyConfig) -> None:
    """Add ``args.method args.path`` to the registry under ``config.root``."""
    store = RegistryStore(config.registry_path)
    c = palette()
    try:
        registry = store.load()
        registry = add_route(
            registry,
            args.path,
            args.method,
            _selection(args),
            store=store,
            root=config.root,
            handler_filename=config.handler_filename,
        )
    except DevboyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    function_name = next(
        function.name
        for function, route in registry.routes()
        if route.path == args.path and route.method == Method.parse(args.method)
    )
    print(
        f"{c.green}Route {args.path} created successfully "
        f"and added to {function_name} function.{c.reset}"
    )
    if function_name != DEFAULT_FUNCTION:
        print(
            f"{c.yellow}Don't forget to create {registry[function_name].handler_path} "
            f"in your project root as an entry point for this new function.{c.reset}"
        )
