"""Namespaces — prefix a group of routes with a shared path and require path.

A namespace is usually the first and only entry at the outer level of a
route table.  The outer namespace should carry a complete require path
(a dotted module path or an absolute directory) so the module loader can
find the controllers::

    routes = namespace(
        NamespaceDefinition(path="api/v1", require_path="app.controllers"),
        [
            get("/", "home", "root"),
            resources("users", only=["index", "show"]),
            namespace(NamespaceDefinition(path="admin", require_path="admin"), [
                resources("offerings", only=["index"]),
            ]),
        ],
    )

Nested namespaces compose by repeated prefixing, so the application order
of the levels does not matter.
"""

import posixpath
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace

from flauta.routing.route import Route, RouteTree

_EDGE_HYPHEN = re.compile(r"^-|-$")


@dataclass(frozen=True, slots=True)
class NamespaceDefinition:
    """Prefixes applied to every route nested in a namespace.

    ``alias`` replaces ``path`` as the prefix of nested route aliases.
    """

    require_path: str
    path: str
    alias: str | None = None


def path_join(first: str, second: str) -> str:
    """Join two path parts with a single ``/`` and normalize the result.

    Empty parts are elided, duplicate slashes collapse, ``.`` and ``..``
    segments are resolved and a trailing slash on the second part is
    kept.  An entirely empty join yields ``"."``.

    Examples::

        >>> path_join("foo", "bar")
        'foo/bar'
        >>> path_join("api/v1", "/")
        'api/v1/'
        >>> path_join("/controllers/", "/users")
        '/controllers/users'
    """
    joined = "/".join(part for part in (first, second) if part)
    if not joined:
        return "."

    normalized = posixpath.normpath(joined)
    # POSIX keeps a leading "//"; a URL path never means anything by it
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    if joined.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    return normalized


def slugify_alias(alias: str) -> str:
    """Flatten a joined alias path into a hyphenated identifier.

    ``/`` becomes ``-`` and one leading and one trailing hyphen are
    dropped, e.g. ``"api/v1/users"`` -> ``"api-v1-users"``.
    """
    return _EDGE_HYPHEN.sub("", alias.replace("/", "-"))


def apply_namespace_to_route(
    namespace_definition: NamespaceDefinition,
    namespaced_route: Route,
) -> Route:
    """Prepend the namespace's require path, path and alias to *namespaced_route*.

    Routes without an alias stay without one.
    """
    changes: dict[str, str] = {
        "require_path": path_join(namespace_definition.require_path, namespaced_route.require_path),
        "path": path_join(namespace_definition.path, namespaced_route.path),
    }
    if namespaced_route.alias is not None:
        alias_prefix = namespace_definition.alias or namespace_definition.path
        changes["alias"] = slugify_alias(path_join(alias_prefix, namespaced_route.alias))
    return replace(namespaced_route, **changes)


def namespace(
    namespace_definition: NamespaceDefinition | Mapping[str, str],
    namespaced_routes: RouteTree,
) -> list[RouteTree]:
    """Apply *namespace_definition* to every route of *namespaced_routes*.

    Nested sequences (from ``resources()`` or inner ``namespace()`` calls)
    keep their shape; every route inside them is prefixed.

    Args:
        namespace_definition: A ``NamespaceDefinition``, or a mapping with
            ``require_path``, ``path`` and optional ``alias`` keys.
        namespaced_routes: A route or a (nested) sequence of routes.

    Raises:
        TypeError: If the tree contains something other than routes and
            sequences of routes.

    """
    if isinstance(namespace_definition, Mapping):
        namespace_definition = NamespaceDefinition(**namespace_definition)
    if isinstance(namespaced_routes, Route):
        namespaced_routes = [namespaced_routes]
    return [_apply_to_node(namespace_definition, node) for node in namespaced_routes]


def _apply_to_node(namespace_definition: NamespaceDefinition, node: RouteTree) -> RouteTree:
    if isinstance(node, Route):
        return apply_namespace_to_route(namespace_definition, node)
    if isinstance(node, (list, tuple)):
        return namespace(namespace_definition, node)
    msg = (
        "Route trees may only contain Route objects and sequences, "
        f"got {type(node).__name__}"
    )
    raise TypeError(msg)
