"""Flauta CLI — inspect a route table from the command line.

Entry point registered as ``flauta`` in ``pyproject.toml``::

    [project.scripts]
    flauta = "flauta.cli:main"
"""

import argparse
import sys

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``flauta`` command."""
    parser = argparse.ArgumentParser(
        prog="flauta",
        description="Flauta — centralized route declaration with path helpers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- flauta routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="Print valid and invalid routes")
    routes_parser.add_argument(
        "target",
        help="Routes file (e.g. config/routes.py) or import string (e.g. myapp.routes:resolve)",
    )
    routes_parser.add_argument(
        "--compile",
        action="store_true",
        help="Byte-compile the routes module before loading it",
    )
    routes_parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Logging level while resolving routes",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from flauta.cli._routes import run_routes

        run_routes(args)
