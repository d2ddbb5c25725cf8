"""Flauta — centralized, Rails-like route declaration for Python web apps.

Declare the whole route table in one place, resolve it into registered
framework routes, and get path helpers for every aliased route.

Basic usage::

    from flauta import NamespaceDefinition, get, namespace, register, resolve, resources

    routes = namespace(NamespaceDefinition(path="api/v1", require_path="app.controllers"), [
        get("/", "home", "root", alias="root"),
        resources("users", only=["index", "show"]),
    ])

    router = register(app, resolve(routes))
    router.paths["api-v1-user"]({"id": 5})  # "api/v1/users/5"

Print the table with ``flauta routes config/routes.py``.
"""

__version__ = "0.2.0"
__all__ = [
    "ConfigurationError",
    "FlautaConfig",
    "FlautaError",
    "HTTPMethod",
    "LoadError",
    "MissingHandlerError",
    "ModuleLoadError",
    "NamespaceDefinition",
    "ResolvedRouter",
    "Route",
    "destroy",
    "get",
    "head",
    "namespace",
    "patch",
    "post",
    "put",
    "register",
    "resolve",
    "resources",
    "route",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "flauta.errors",
    "FlautaConfig": "flauta.config",
    "FlautaError": "flauta.errors",
    "HTTPMethod": "flauta.routing.route",
    "LoadError": "flauta.errors",
    "MissingHandlerError": "flauta.errors",
    "ModuleLoadError": "flauta.errors",
    "NamespaceDefinition": "flauta.dsl.namespace",
    "ResolvedRouter": "flauta.routing.route",
    "Route": "flauta.routing.route",
    "destroy": "flauta.dsl.http",
    "get": "flauta.dsl.http",
    "head": "flauta.dsl.http",
    "namespace": "flauta.dsl.namespace",
    "patch": "flauta.dsl.http",
    "post": "flauta.dsl.http",
    "put": "flauta.dsl.http",
    "register": "flauta.routing.registrar",
    "resolve": "flauta.routing.resolver",
    "resources": "flauta.dsl.resources",
    "route": "flauta.dsl.http",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import flauta`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
