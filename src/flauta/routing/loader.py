"""Controller module loading and handler lookup.

A controller module is any object exposing handlers by name: a Python
module, an instance of a controller class, or a plain mapping.  A module
may also wrap its handlers in a ``default`` container (for example
``default = UsersController()``); that container is searched first, the
module itself second.  The same lookup is used when validating a route at
load time and when registering it with a framework.

Loading never raises: every failure becomes a ``LoadError`` value paired
with the route.
"""

import hashlib
import importlib
import importlib.util
import logging
import re
import sys
from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path
from types import ModuleType
from typing import Any

from flauta._internal.types import Handler, Module, ModuleLoader
from flauta.errors import MissingHandlerError, ModuleLoadError
from flauta.routing.route import Route, RouteModuleTuple

logger = logging.getLogger("flauta.router")

DEFAULT_EXPORT = "default"

_PATH_PREFIXES = ("/", "~", "./", "../")
_UNSAFE_NAME_CHARS = re.compile(r"\W")

ModuleRequirer = Callable[[Route], RouteModuleTuple]


def _lookup(container: Any, name: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(name)
    return getattr(container, name, None)


def resolve_handler(module: Module, handler: str) -> Handler | None:
    """Find *handler* in *module*, preferring its ``default`` container.

    Returns ``None`` when neither the default container nor the module
    itself exports the name.
    """
    default = _lookup(module, DEFAULT_EXPORT)
    if default is not None:
        found = _lookup(default, handler)
        if found is not None:
            return found
    return _lookup(module, handler)


def import_module_loader(identifier: str) -> ModuleType:
    """Load the controller module named by a route's require path.

    Identifiers starting with ``/``, ``~``, ``./`` or ``../``, or ending in
    ``.py``, are files: ``<identifier>.py`` or the package directory's
    ``__init__.py``.  File modules are kept in ``sys.modules`` so a
    controller backing several routes executes once.

    Anything else is a module path: ``/`` separators become ``.`` and
    hyphens become underscores (``app.controllers/user-sessions`` imports
    ``app.controllers.user_sessions``).

    Raises:
        ModuleNotFoundError: If the module or file does not exist.

    """
    if identifier.startswith(_PATH_PREFIXES) or identifier.endswith(".py"):
        return _load_file_module(identifier)
    return importlib.import_module(_dotted_name(identifier))


def _dotted_name(identifier: str) -> str:
    parts = [part for part in re.split(r"[/.]", identifier) if part]
    return ".".join(part.replace("-", "_") for part in parts)


def _load_file_module(identifier: str) -> ModuleType:
    path = Path(identifier).expanduser()
    candidates = [path] if path.suffix == ".py" else [
        path.with_name(path.name + ".py"),
        path / "__init__.py",
    ]
    source = next((candidate for candidate in candidates if candidate.is_file()), None)
    if source is None:
        msg = f"No controller module found at {identifier!r}"
        raise ModuleNotFoundError(msg)

    source = source.resolve()
    module_name = _controller_module_name(source)
    if module_name in sys.modules:
        return sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, source)
    if spec is None or spec.loader is None:
        msg = f"Cannot load controller module from {str(source)!r}"
        raise ImportError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[module_name]
        raise
    return module


def _controller_module_name(source: Path) -> str:
    """Stable ``sys.modules`` key for a resolved controller file.

    The digest of the full path keeps ``admin/users.py`` and
    ``admin_users.py`` apart; the stem only makes tracebacks readable.
    """
    digest = hashlib.sha1(str(source).encode(), usedforsecurity=False).hexdigest()
    stem = _UNSAFE_NAME_CHARS.sub("_", source.stem)
    return f"_flauta_controller_{stem}_{digest}"


def safe_require_route_module(route: Route, module_loader: ModuleLoader) -> RouteModuleTuple:
    """Load the controller module for *route* and check it exports the handler.

    Returns ``(route, module)`` on success, ``(route, MissingHandlerError)``
    when the module lacks the handler, and ``(route, ModuleLoadError)``
    when *module_loader* or the handler lookup raises.  Never raises.
    """
    try:
        module = module_loader(route.require_path)
        handler = resolve_handler(module, route.handler)
    except Exception as exc:
        logger.debug(
            "Could not load %s for %s %s: %s",
            route.require_path,
            route.http_method,
            route.path,
            exc,
        )
        error = ModuleLoadError(str(exc))
        error.__cause__ = exc
        return route, error

    if handler is None:
        logger.debug("Module %s has no handler %s", route.require_path, route.handler)
        return route, MissingHandlerError()

    return route, module


def module_requirer(module_loader: ModuleLoader) -> ModuleRequirer:
    """Bind *module_loader* into a per-route requirer for ``load_routes()``."""
    return partial(safe_require_route_module, module_loader=module_loader)


require_route_module: ModuleRequirer = module_requirer(import_module_loader)
