"""Router target resolution — turns a CLI target into a ResolvedRouter.

A target is either a Python file (``config/routes.py``) or an import
string (``myapp.routes`` / ``myapp.routes:build``).  The module must
expose a ``resolve`` callable (or the named attribute) that takes no
arguments and returns a ``ResolvedRouter``.
"""

import importlib
import importlib.util
import os
import py_compile
import sys
from pathlib import Path
from types import ModuleType

from flauta.errors import ConfigurationError
from flauta.routing.route import ResolvedRouter

DEFAULT_ATTRIBUTE = "resolve"


def is_file_target(target: str) -> bool:
    """True if *target* names a Python file rather than an import string."""
    return target.endswith(".py") or os.sep in target or "/" in target


def load_router_module(target: str, *, compile_first: bool = False) -> tuple[ModuleType, str]:
    """Import the module named by *target*.

    Returns the module and the name of the attribute to call.  With
    *compile_first*, the module source is byte-compiled before import so
    syntax errors are reported without executing anything.

    Raises:
        ConfigurationError: If the file is missing, does not compile or
            raises while executing.
        ModuleNotFoundError: If an import-string module cannot be found.

    """
    if is_file_target(target):
        path = Path(target)
        if not path.is_file():
            msg = f"File {target!r} does not exist or is not readable"
            raise ConfigurationError(msg)
        if compile_first:
            _compile(path)
        return _exec_file(path), DEFAULT_ATTRIBUTE

    module_path, _, attr_name = target.partition(":")
    _ensure_cwd_importable()
    if compile_first:
        spec = importlib.util.find_spec(module_path)
        if spec is not None and spec.origin and spec.origin.endswith(".py"):
            _compile(Path(spec.origin))
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError:
        raise
    except Exception as exc:
        msg = f"Could not import {module_path!r}: {exc}"
        raise ConfigurationError(msg) from exc
    return module, attr_name or DEFAULT_ATTRIBUTE


def resolve_router(target: str, *, compile_first: bool = False) -> ResolvedRouter:
    """Load *target* and call its resolve function.

    Raises:
        ConfigurationError: If the target cannot be loaded, has no callable
            resolve attribute, the call raises, or its result is not a
            ``ResolvedRouter``.
        ModuleNotFoundError: If an import-string module cannot be found.

    """
    module, attr_name = load_router_module(target, compile_first=compile_first)

    resolve = getattr(module, attr_name, None)
    if not callable(resolve):
        msg = f"{target!r} does not define a callable {attr_name!r}"
        raise ConfigurationError(msg)

    try:
        router = resolve()
    except Exception as exc:
        msg = f"{target!r}.{attr_name}() raised an error: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(router, ResolvedRouter):
        msg = f"{target!r}.{attr_name}() returned {type(router).__name__}, not a ResolvedRouter"
        raise ConfigurationError(msg)
    return router


def _compile(path: Path) -> None:
    try:
        py_compile.compile(str(path), doraise=True)
    except py_compile.PyCompileError as exc:
        msg = f"Could not compile {str(path)!r}: {exc.msg}"
        raise ConfigurationError(msg) from exc


def _exec_file(path: Path) -> ModuleType:
    # Dotted controller paths resolve against the working directory
    _ensure_cwd_importable()
    spec = importlib.util.spec_from_file_location(f"flauta_routes_{path.stem}", path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load routes from {str(path)!r}"
        raise ConfigurationError(msg)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        msg = f"Could not load routes from {str(path)!r}: {exc}"
        raise ConfigurationError(msg) from exc
    return module


def _ensure_cwd_importable() -> None:
    cwd = os.getcwd()
    if cwd not in sys.path and "" not in sys.path:
        sys.path.insert(0, cwd)
