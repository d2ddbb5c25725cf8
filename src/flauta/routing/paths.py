"""Path helpers — build concrete URLs from route aliases.

Each aliased route gets a generator that fills in its ``:name``
placeholders::

    paths = build_path_helpers(router.routes)
    paths["api-v1-user"]({"id": 5})  # "api/v1/users/5"
    paths["api-v1-user"]()           # "api/v1/users/:id"

Placeholders only match whole path segments, and values for names that
do not appear in the path are ignored.
"""

import re
from collections.abc import Callable, Iterable

from flauta._internal.types import PathGenerator, PathProperties
from flauta.routing.route import RouteModuleTuple

_PLACEHOLDER = re.compile(r"(?:^|(?<=/)):([-a-zA-Z0-9_]+)(?=/|$)")

PathBuilder = Callable[[RouteModuleTuple], PathGenerator]


def path_properties(path: str) -> list[str]:
    """Return the placeholder names of *path* in order of appearance.

    Examples::

        >>> path_properties("api/v1/:parentId/things/:id")
        ['parentId', 'id']
    """
    return _PLACEHOLDER.findall(path)


def fill_path(path: str, properties: PathProperties | None = None) -> str:
    """Substitute the ``:name`` segments of *path* found in *properties*.

    Segments without a matching property stay as they are.
    """
    if not properties:
        return path

    expected = set(path_properties(path))
    values = {key: str(value) for key, value in properties.items() if key in expected}
    if not values:
        return path

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        return values.get(name, match.group(0))

    return _PLACEHOLDER.sub(_substitute, path)


def route_module_tuple_to_path_builder(route_module: RouteModuleTuple) -> PathGenerator:
    """Return a path generator closed over the route of *route_module*."""
    route, _module = route_module

    def build_path(properties: PathProperties | None = None) -> str:
        return fill_path(route.path, properties)

    build_path.__name__ = f"path_for_{route.alias or route.handler}"
    return build_path


def build_path_helpers(
    route_modules: Iterable[RouteModuleTuple],
    path_builder: PathBuilder = route_module_tuple_to_path_builder,
) -> dict[str, PathGenerator]:
    """Map each route alias to a path generator.

    Routes without an alias are skipped.  When several routes share an
    alias, the last one wins.
    """
    by_alias: dict[str, RouteModuleTuple] = {}
    for route_module in route_modules:
        route = route_module[0]
        if route.alias is not None:
            by_alias[route.alias] = route_module
    return {alias: path_builder(route_module) for alias, route_module in by_alias.items()}
