"""Route resolution — flatten, load, partition, build path helpers.

Usage::

    from flauta import get, namespace, resolve, resources

    router = resolve(
        namespace({"path": "api/v1", "require_path": "app.controllers"}, [
            get("/", "home", "root"),
            resources("users"),
        ])
    )
    router.routes          # [(Route, module), ...] ready to register
    router.invalid_routes  # [(Route, LoadError), ...] to report
    router.paths["api-v1-user"]({"id": 1})

Every call recomputes everything; nothing is cached between calls.
"""

from collections.abc import Callable, Iterator

from flauta._internal.types import PathGenerator
from flauta.errors import LoadError
from flauta.routing.loader import ModuleRequirer, require_route_module
from flauta.routing.paths import build_path_helpers
from flauta.routing.route import LoadedRoutes, ResolvedRouter, Route, RouteModuleTuple, RouteTree

RouteLoader = Callable[[RouteTree], LoadedRoutes]
PathHelpersBuilder = Callable[[list[RouteModuleTuple]], dict[str, PathGenerator]]


def flatten_routes(route_tree: RouteTree) -> Iterator[Route]:
    """Yield every route of *route_tree* depth-first, in declaration order.

    Raises:
        TypeError: If the tree contains something other than routes and
            sequences of routes.

    """
    stack: list[RouteTree] = [route_tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Route):
            yield node
        elif isinstance(node, (list, tuple)):
            stack.extend(reversed(node))
        else:
            msg = (
                "Route trees may only contain Route objects and sequences, "
                f"got {type(node).__name__}"
            )
            raise TypeError(msg)


def load_routes(
    route_tree: RouteTree,
    module_requirer: ModuleRequirer = require_route_module,
) -> LoadedRoutes:
    """Load the controller of every route and partition the results.

    Each route is loaded exactly once.  Tuples whose second element is a
    ``LoadError`` go to ``invalid_routes``; both partitions keep the
    declaration order.
    """
    loaded = LoadedRoutes()
    for route in flatten_routes(route_tree):
        route_module = module_requirer(route)
        if isinstance(route_module[1], LoadError):
            loaded.invalid_routes.append(route_module)
        else:
            loaded.routes.append(route_module)
    return loaded


def resolve(
    route_tree: RouteTree,
    route_loader: RouteLoader = load_routes,
    path_helpers_builder: PathHelpersBuilder = build_path_helpers,
) -> ResolvedRouter:
    """Resolve *route_tree* into valid routes, invalid routes and path helpers.

    Path helpers are built from the valid routes only.
    """
    loaded = route_loader(route_tree)
    return ResolvedRouter(
        routes=loaded.routes,
        invalid_routes=loaded.invalid_routes,
        paths=path_helpers_builder(loaded.routes),
    )
