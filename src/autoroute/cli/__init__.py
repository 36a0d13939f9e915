"""Autoroute CLI — inspect the routes a controller compiles to.

Entry point registered as ``autoroute`` in ``pyproject.toml``::

    [project.scripts]
    autoroute = "autoroute.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``autoroute`` command."""
    parser = argparse.ArgumentParser(
        prog="autoroute",
        description="Autoroute — convention-based routes for controller classes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- autoroute routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes a controller compiles to")
    routes_parser.add_argument("path", help="Base path (e.g. api/v1)")
    routes_parser.add_argument(
        "controller",
        help="Controller import string (e.g. myapp.controllers:UserController)",
    )
    routes_parser.add_argument(
        "--namespace",
        action="append",
        default=[],
        help="Module prefix tried for short controller names (repeatable)",
    )
    routes_parser.add_argument(
        "--raw-prefix",
        action="store_true",
        help="Match verb prefixes without requiring a word boundary",
    )
    routes_parser.add_argument(
        "--emit",
        metavar="DIR",
        default=None,
        help="Also write a listing of registration statements to DIR",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from autoroute.cli._routes import run_routes

        run_routes(args)
