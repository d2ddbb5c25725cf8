"""Route builders for individual HTTP verbs.

Every builder is :func:`route` with the verb pre-bound::

    get("users", "app.controllers.users", "index", alias="users")
    destroy("users/:id", "app.controllers.users", "destroy")

Require paths given outside of any namespace should be complete module
identifiers (a dotted module path or an absolute file path).
"""

from functools import partial

from flauta.routing.route import HTTPMethod, Route


def route(
    http_method: HTTPMethod | str,
    endpoint_path: str,
    require_path: str,
    handler: str,
    *,
    alias: str | None = None,
) -> Route:
    """Build a :class:`Route` for any HTTP verb.

    Args:
        http_method: The verb, as an ``HTTPMethod`` or its name in any case.
        endpoint_path: The URL path; ``:name`` segments are placeholders.
        require_path: The controller module that exports *handler*.
        handler: Name of the function handling requests to this endpoint.
        alias: Name of the path helper for this route.  Omitted means the
            route gets no path helper.

    Raises:
        ValueError: If *http_method* is not a supported verb.

    """
    return Route(
        http_method=HTTPMethod(str(http_method).upper()),
        path=endpoint_path,
        require_path=require_path,
        handler=handler,
        alias=alias,
    )


destroy = partial(route, HTTPMethod.DELETE)
get = partial(route, HTTPMethod.GET)
head = partial(route, HTTPMethod.HEAD)
patch = partial(route, HTTPMethod.PATCH)
post = partial(route, HTTPMethod.POST)
put = partial(route, HTTPMethod.PUT)
