"""Framework registration — hand resolved routes to a web framework.

The framework is any object with one registration callable per verb,
each taking ``(path, handler)``::

    app.get("api/v1/users", users.index)
    app.delete("api/v1/users/:id", users.destroy)

``register()`` walks the valid routes of a ``ResolvedRouter`` and calls
the matching verb for each.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from operator import attrgetter
from typing import Protocol

from flauta._internal.types import Handler
from flauta.routing.loader import resolve_handler
from flauta.routing.route import HTTPMethod, ResolvedRouter, RouteModuleTuple

logger = logging.getLogger("flauta.router")


class FrameworkApp(Protocol):
    """Registration surface a web framework must expose."""

    def get(self, path: str, handler: Handler, /) -> object: ...

    def head(self, path: str, handler: Handler, /) -> object: ...

    def post(self, path: str, handler: Handler, /) -> object: ...

    def put(self, path: str, handler: Handler, /) -> object: ...

    def patch(self, path: str, handler: Handler, /) -> object: ...

    def delete(self, path: str, handler: Handler, /) -> object: ...


# HTTP verb -> accessor for the framework's registration callable
VERB_REGISTRARS: dict[HTTPMethod, Callable[[FrameworkApp], Callable[[str, Handler], object]]] = {
    HTTPMethod.DELETE: attrgetter("delete"),
    HTTPMethod.GET: attrgetter("get"),
    HTTPMethod.HEAD: attrgetter("head"),
    HTTPMethod.PATCH: attrgetter("patch"),
    HTTPMethod.POST: attrgetter("post"),
    HTTPMethod.PUT: attrgetter("put"),
}

RouteRegistrar = Callable[[FrameworkApp, RouteModuleTuple], RouteModuleTuple]


def register_route(app: FrameworkApp, route_module: RouteModuleTuple) -> RouteModuleTuple:
    """Register one route with *app* and return *route_module* unchanged.

    A module without the route's handler is logged and skipped; other
    routes are unaffected.
    """
    route, module = route_module
    handler = resolve_handler(module, route.handler)
    if handler is None:
        logger.warning(
            "Route %s handler %s not found for module %s",
            route.path,
            route.handler,
            route.require_path,
        )
        return route_module

    method = HTTPMethod(str(route.http_method).upper())
    VERB_REGISTRARS[method](app)(route.path, handler)
    logger.debug("Registered %s %s -> %s.%s", method, route.path, route.require_path, route.handler)
    return route_module


def register(
    app: FrameworkApp,
    router: ResolvedRouter,
    route_registrar: RouteRegistrar = register_route,
) -> ResolvedRouter:
    """Register every valid route of *router* with *app*.

    Returns a router of the same shape, its routes replaced by whatever
    *route_registrar* returned for each.
    """
    registered = [route_registrar(app, route_module) for route_module in router.routes]
    return replace(router, routes=registered)
