"""Resources — the five canonical CRUD routes for a named entity.

``resources("users")`` expands to::

    POST    users          create
    DELETE  users/:id      destroy
    GET     users          index    (alias "users")
    GET     users/:id      show     (alias "user")
    PATCH   users/:id      update

The resource name doubles as the require path of the controller module,
so inside ``namespace(NamespaceDefinition(require_path="app.controllers",
...), [...])`` the routes above load ``app.controllers.users``.
"""

from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import Protocol

import inflection

from flauta.dsl.http import destroy as http_delete
from flauta.dsl.http import get, patch, post
from flauta.dsl.namespace import path_join
from flauta.routing.route import Route


class ResourceType(StrEnum):
    CREATE = "create"
    DESTROY = "destroy"
    INDEX = "index"
    SHOW = "show"
    UPDATE = "update"


class Inflector(Protocol):
    """English inflection used to derive index and show aliases."""

    def pluralize(self, word: str) -> str: ...

    def singularize(self, word: str) -> str: ...


# The ``inflection`` module's functions satisfy the protocol directly.
DEFAULT_INFLECTOR: Inflector = inflection


def resource_path(resource_name: str, alias: str | None = None) -> str:
    """Return *alias* when given, otherwise *resource_name*."""
    return resource_name if alias is None else alias


def resource_id_path(path: str) -> str:
    """Append the ``:id`` placeholder segment to *path*.

    Examples::

        >>> resource_id_path("foo/bar")
        'foo/bar/:id'
    """
    return path_join(path, ":id")


def create(
    resource_name: str,
    *,
    alias: str | None = None,
    inflector: Inflector = DEFAULT_INFLECTOR,
) -> Route:
    """POST route for creating a resource.  Never carries an alias."""
    return post(resource_path(resource_name, alias), resource_name, "create")


def destroy(
    resource_name: str,
    *,
    alias: str | None = None,
    inflector: Inflector = DEFAULT_INFLECTOR,
) -> Route:
    """DELETE route for a single resource.  Never carries an alias."""
    return http_delete(
        resource_id_path(resource_path(resource_name, alias)), resource_name, "destroy"
    )


def index(
    resource_name: str,
    *,
    alias: str | None = None,
    inflector: Inflector = DEFAULT_INFLECTOR,
) -> Route:
    """GET route listing the resource, aliased by the plural name."""
    return get(
        resource_path(resource_name, alias),
        resource_name,
        "index",
        alias=inflector.pluralize(resource_path(resource_name, alias)),
    )


def show(
    resource_name: str,
    *,
    alias: str | None = None,
    inflector: Inflector = DEFAULT_INFLECTOR,
) -> Route:
    """GET route for a single resource, aliased by the singular name."""
    return get(
        resource_id_path(resource_path(resource_name, alias)),
        resource_name,
        "show",
        alias=inflector.singularize(resource_path(resource_name, alias)),
    )


def update(
    resource_name: str,
    *,
    alias: str | None = None,
    inflector: Inflector = DEFAULT_INFLECTOR,
) -> Route:
    """PATCH route for a single resource.  Never carries an alias."""
    return patch(resource_id_path(resource_path(resource_name, alias)), resource_name, "update")


ResourceBuilder = Callable[..., Route]

# Canonical order of the generated routes
DEFAULT_RESOURCES: dict[ResourceType, ResourceBuilder] = {
    ResourceType.CREATE: create,
    ResourceType.DESTROY: destroy,
    ResourceType.INDEX: index,
    ResourceType.SHOW: show,
    ResourceType.UPDATE: update,
}


def resources(
    name: str,
    *,
    only: Iterable[ResourceType | str] | None = None,
    exclude: Iterable[ResourceType | str] | None = None,
    alias: str | None = None,
    inflector: Inflector = DEFAULT_INFLECTOR,
) -> list[Route]:
    """Build the CRUD routes for resource *name*.

    Args:
        name: Resource name, used as the URL segment and the controller's
            require path.
        only: Resource types to generate, in this order.  ``None`` or an
            empty sequence generates all five in canonical order.
        exclude: Resource types to drop, applied after *only*.
        alias: Replaces *name* in the URL path and in the index/show
            aliases.  The require path keeps *name*.
        inflector: Pluralizes the index alias and singularizes the show
            alias.

    Raises:
        ValueError: If *only* or *exclude* names an unknown resource type.

    """
    selected = [ResourceType(kind) for kind in only or ()] or list(DEFAULT_RESOURCES)
    excluded = {ResourceType(kind) for kind in exclude or ()}

    return [
        DEFAULT_RESOURCES[kind](name, alias=alias, inflector=inflector)
        for kind in dict.fromkeys(selected)
        if kind not in excluded
    ]
