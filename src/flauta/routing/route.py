"""Route, HTTPMethod and ResolvedRouter value types."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

from flauta._internal.types import PathGenerator


class HTTPMethod(StrEnum):
    """HTTP verbs a route can be declared for."""

    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route declaration.

    ``path`` is the URL pattern (``:name`` segments are placeholders),
    ``require_path`` identifies the controller module and ``handler`` is
    the name of the function that module exports.  ``alias`` names the
    route's path helper; ``None`` means the route has no helper.
    """

    http_method: HTTPMethod
    path: str
    require_path: str
    handler: str
    alias: str | None = None


# A route paired with its loaded controller module, or with the LoadError
# explaining why the module could not be used.
RouteModuleTuple: TypeAlias = tuple[Route, Any]

# Route | Sequence[RouteTree], nested to any depth
RouteTree: TypeAlias = Route | list["RouteTree"] | tuple["RouteTree", ...]


@dataclass(frozen=True, slots=True)
class LoadedRoutes:
    """Loaded routes partitioned by whether their controller resolved."""

    routes: list[RouteModuleTuple] = field(default_factory=list)
    invalid_routes: list[RouteModuleTuple] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ResolvedRouter:
    """The outcome of resolving a route tree.

    Created fresh by every ``resolve()`` call.
    """

    routes: list[RouteModuleTuple] = field(default_factory=list)
    invalid_routes: list[RouteModuleTuple] = field(default_factory=list)
    paths: dict[str, PathGenerator] = field(default_factory=dict)
