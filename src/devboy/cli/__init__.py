"""Devboy CLI — route scaffolding, dev server, and deployment checks.

Entry point registered as ``devboy`` in ``pyproject.toml``::

    [project.scripts]
    devboy = "devboy.cli:main"
"""

import argparse
import logging
import sys

from devboy.config import DevboyConfig
from devboy.errors import ConfigurationError


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``devboy`` command."""
    parser = argparse.ArgumentParser(
        prog="devboy",
        description="Devboy CLI for managing serverless API projects.",
    )
    parser.add_argument("--root", default=None, help="Project root (default: current directory)")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity (default: info, or $DEVBOY_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- devboy new:route -------------------------------------------------
    route_parser = subparsers.add_parser("new:route", help="Create a new API route")
    route_parser.add_argument("path", help="Route path, e.g. /users/get_profile")
    route_parser.add_argument("method", help="HTTP method: GET, POST, PUT or DELETE")
    target = route_parser.add_mutually_exclusive_group()
    target.add_argument(
        "--function",
        metavar="NAME",
        default=None,
        help="Attach the route to an existing function",
    )
    target.add_argument(
        "--new-function",
        metavar="NAME",
        default=None,
        help="Create a new function and attach the route to it",
    )

    # -- devboy start -----------------------------------------------------
    start_parser = subparsers.add_parser("start", help="Start the Devboy development server")
    start_parser.add_argument("--host", default=None, help="Bind host address")
    start_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    # -- devboy deploy ----------------------------------------------------
    subparsers.add_parser("deploy", help="Deploy the Devboy application")

    # -- devboy routes ----------------------------------------------------
    subparsers.add_parser("routes", help="List registered routes")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = _load_config(args)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "new:route":
        from devboy.cli._new_route import create_route

        create_route(args, config)
    elif args.command == "start":
        from devboy.cli._start import start_server

        start_server(config)
    elif args.command == "deploy":
        from devboy.cli._deploy import run_deploy

        run_deploy(config)
    elif args.command == "routes":
        from devboy.cli._routes import run_routes

        run_routes(config)


def _load_config(args: argparse.Namespace) -> DevboyConfig:
    """Merge environment settings with command-line overrides."""
    try:
        return DevboyConfig.from_env(
            root=args.root,
            log_level=args.log_level,
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
