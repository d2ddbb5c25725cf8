"""``flauta routes`` — print the resolved route table.

Resolves a routes module and prints two aligned tables: the valid routes
(with their path helper names) and the routes whose controller could not
be loaded (with the reason).
"""

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from flauta.cli._resolve import resolve_router
from flauta.config import FlautaConfig
from flauta.errors import ConfigurationError
from flauta.routing.route import ResolvedRouter, RouteModuleTuple

logger = logging.getLogger("flauta.cli")

HEADERS = ("Path Helper", "Verb", "URI Pattern", "Controller Module", "Handler")
INVALID_HEADERS = (*HEADERS[1:], "Error")


def route_fields(route_module: RouteModuleTuple) -> list[str]:
    route, _module = route_module
    return [
        route.alias or "",
        str(route.http_method),
        route.path,
        route.require_path,
        route.handler,
    ]


def invalid_route_fields(route_module: RouteModuleTuple) -> list[str]:
    _route, error = route_module
    return [*route_fields(route_module)[1:], str(error)]


def compute_column_widths(lines: Sequence[Sequence[str]]) -> list[int]:
    """Longest field of each column, header row included."""
    return [max(len(field) for field in column) for column in zip(*lines, strict=True)]


def format_line(fields: Sequence[str], widths: Sequence[int], separator_distance: int) -> str:
    """Pad each field to its column width plus the separator distance."""
    padded = (
        field.ljust(width + separator_distance)
        for field, width in zip(fields, widths, strict=True)
    )
    return "".join(padded).rstrip()


def format_table(
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
    separator_distance: int,
) -> list[str]:
    lines = [list(headers), *(list(row) for row in rows)]
    widths = compute_column_widths(lines)
    return [format_line(line, widths, separator_distance) for line in lines]


def print_router(
    router: ResolvedRouter,
    config: FlautaConfig | None = None,
    file: TextIO | None = None,
) -> None:
    """Print the valid and invalid route tables of *router*.

    An empty section is omitted entirely.
    """
    config = config or FlautaConfig()
    out = file or sys.stdout

    if router.routes:
        print(config.valid_heading, file=out)
        rows = [route_fields(route_module) for route_module in router.routes]
        for line in format_table(HEADERS, rows, config.field_separator_distance):
            print(line, file=out)

    if router.invalid_routes:
        print(config.invalid_heading, file=out)
        rows = [invalid_route_fields(route_module) for route_module in router.invalid_routes]
        for line in format_table(INVALID_HEADERS, rows, config.field_separator_distance):
            print(line, file=out)


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table of the routes module named by ``args.target``."""
    config = FlautaConfig(log_level=args.log_level)
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        router = resolve_router(args.target, compile_first=args.compile)
    except (ConfigurationError, ModuleNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.debug(
        "Resolved %d valid and %d invalid routes from %s",
        len(router.routes),
        len(router.invalid_routes),
        args.target,
    )
    print_router(router, config)
