"""Tests for flauta.routing.loader — handler lookup and safe module loading."""

import logging
import sys
import types
from pathlib import Path

import pytest

from flauta.errors import LoadError, MissingHandlerError, ModuleLoadError
from flauta.routing.loader import (
    import_module_loader,
    module_requirer,
    require_route_module,
    resolve_handler,
    safe_require_route_module,
)
from flauta.routing.resolver import load_routes
from flauta.routing.route import HTTPMethod, Route


def _root() -> str:
    return "root"


def _route(require_path: str = "app.controllers.home", handler: str = "root") -> Route:
    return Route(HTTPMethod.GET, "api/v1", require_path, handler)


class _Controller:
    def show(self) -> str:
        return "show"


class TestResolveHandler:
    def test_mapping(self) -> None:
        assert resolve_handler({"root": _root}, "root") is _root

    def test_attribute(self) -> None:
        module = types.SimpleNamespace(root=_root)
        assert resolve_handler(module, "root") is _root

    def test_default_container_preferred(self) -> None:
        def wrapped() -> str:
            return "wrapped"

        module = types.SimpleNamespace(root=_root, default={"root": wrapped})
        assert resolve_handler(module, "root") is wrapped

    def test_falls_back_to_module(self) -> None:
        module = types.SimpleNamespace(root=_root, default={"other": _root})
        assert resolve_handler(module, "root") is _root

    def test_default_controller_instance(self) -> None:
        module = types.SimpleNamespace(default=_Controller())
        handler = resolve_handler(module, "show")
        assert handler is not None
        assert handler() == "show"

    def test_missing(self) -> None:
        assert resolve_handler({"other": _root}, "root") is None
        assert resolve_handler(types.SimpleNamespace(), "root") is None


class TestSafeRequireRouteModule:
    def test_loaded_module(self) -> None:
        route = _route()
        module = {"root": _root}
        calls: list[str] = []

        def loader(identifier: str) -> dict:
            calls.append(identifier)
            return module

        assert safe_require_route_module(route, loader) == (route, module)
        assert calls == ["app.controllers.home"]

    def test_loader_raises(self) -> None:
        route = _route()

        def loader(identifier: str) -> dict:
            msg = f"Module {identifier} not found"
            raise ModuleNotFoundError(msg)

        returned_route, error = safe_require_route_module(route, loader)
        assert returned_route is route
        assert isinstance(error, ModuleLoadError)
        assert str(error) == "Module app.controllers.home not found"
        assert isinstance(error.__cause__, ModuleNotFoundError)

    def test_syntax_error_captured(self) -> None:
        def loader(identifier: str) -> dict:
            msg = "invalid syntax"
            raise SyntaxError(msg)

        _, error = safe_require_route_module(_route(), loader)
        assert isinstance(error, ModuleLoadError)
        assert "invalid syntax" in str(error)

    def test_missing_handler(self) -> None:
        route = _route(handler="absent")
        returned_route, error = safe_require_route_module(route, lambda _: {"root": _root})
        assert returned_route is route
        assert isinstance(error, MissingHandlerError)
        assert str(error) == "Controller module missing the handler function"

    def test_missing_handler_distinct_from_load_error(self) -> None:
        _, error = safe_require_route_module(_route(handler="absent"), lambda _: {})
        assert isinstance(error, LoadError)
        assert not isinstance(error, ModuleLoadError)

    def test_handler_in_default_container(self) -> None:
        module = types.SimpleNamespace(default={"root": _root})
        assert safe_require_route_module(_route(), lambda _: module)[1] is module

    def test_lookup_error_captured(self) -> None:
        route = _route()
        module = types.ModuleType("_lazy_controllers")

        def _lazy_getattr(name: str) -> object:
            msg = f"cannot import submodule for {name}"
            raise ImportError(msg)

        module.__getattr__ = _lazy_getattr  # type: ignore[attr-defined]

        returned_route, error = safe_require_route_module(route, lambda _: module)
        assert returned_route is route
        assert isinstance(error, ModuleLoadError)
        assert str(error) == "cannot import submodule for default"
        assert isinstance(error.__cause__, ImportError)

    def test_lookup_error_does_not_abort_siblings(self) -> None:
        good = _route(require_path="app.controllers.home")
        bad = _route(require_path="app.controllers.lazy")
        lazy = types.ModuleType("_lazy_controllers")

        def _lazy_getattr(name: str) -> object:
            msg = "broken submodule"
            raise ImportError(msg)

        lazy.__getattr__ = _lazy_getattr  # type: ignore[attr-defined]
        modules = {"app.controllers.home": {"root": _root}, "app.controllers.lazy": lazy}

        loaded = load_routes([good, bad], module_requirer(modules.__getitem__))

        assert loaded.routes == [(good, {"root": _root})]
        assert [route for route, _ in loaded.invalid_routes] == [bad]

    def test_none_handler_counts_as_missing(self) -> None:
        _, error = safe_require_route_module(_route(), lambda _: {"root": None})
        assert isinstance(error, MissingHandlerError)

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        def loader(identifier: str) -> dict:
            msg = "boom"
            raise ImportError(msg)

        with caplog.at_level(logging.DEBUG, logger="flauta.router"):
            safe_require_route_module(_route(), loader)

        assert any("app.controllers.home" in r.getMessage() for r in caplog.records)


class TestModuleRequirer:
    def test_binds_loader(self) -> None:
        requirer = module_requirer(lambda _: {"root": _root})
        route = _route()
        assert requirer(route) == (route, {"root": _root})


class TestImportModuleLoader:
    @pytest.fixture
    def fake_controllers(self, monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
        """Register fake controller packages on sys.modules."""
        package = types.ModuleType("_fake_app")
        package.__path__ = []  # type: ignore[attr-defined]
        controllers = types.ModuleType("_fake_app.controllers")
        controllers.__path__ = []  # type: ignore[attr-defined]
        sessions = types.ModuleType("_fake_app.controllers.user_sessions")
        sessions.create = _root  # type: ignore[attr-defined]
        monkeypatch.setitem(sys.modules, "_fake_app", package)
        monkeypatch.setitem(sys.modules, "_fake_app.controllers", controllers)
        monkeypatch.setitem(sys.modules, "_fake_app.controllers.user_sessions", sessions)
        return sessions

    def test_dotted_path(self, fake_controllers: types.ModuleType) -> None:
        assert import_module_loader("_fake_app.controllers.user_sessions") is fake_controllers

    def test_slash_and_hyphen_path(self, fake_controllers: types.ModuleType) -> None:
        assert import_module_loader("_fake_app.controllers/user-sessions") is fake_controllers

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            import_module_loader("nonexistent_module_xyz/controllers")

    def test_file_path(self, tmp_path: Path) -> None:
        (tmp_path / "users.py").write_text("def index():\n    return 'users'\n")
        module = import_module_loader(str(tmp_path / "users"))
        assert module.index() == "users"

    def test_file_path_with_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "posts.py").write_text("def index():\n    return 'posts'\n")
        module = import_module_loader(str(tmp_path / "posts.py"))
        assert module.index() == "posts"

    def test_package_directory(self, tmp_path: Path) -> None:
        package = tmp_path / "admin"
        package.mkdir()
        (package / "__init__.py").write_text("def index():\n    return 'admin'\n")
        assert import_module_loader(str(package)).index() == "admin"

    def test_file_module_executes_once(self, tmp_path: Path) -> None:
        (tmp_path / "counted.py").write_text("LOADS = []\nLOADS.append(1)\n")
        first = import_module_loader(str(tmp_path / "counted"))
        second = import_module_loader(str(tmp_path / "counted"))
        assert first is second
        assert first.LOADS == [1]

    @pytest.mark.parametrize("sibling", ["admin_users", "admin-users"])
    def test_similar_paths_load_distinct_modules(self, tmp_path: Path, sibling: str) -> None:
        (tmp_path / "admin").mkdir()
        (tmp_path / "admin" / "users.py").write_text("def index():\n    return 'admin/users'\n")
        (tmp_path / f"{sibling}.py").write_text(f"def index():\n    return {sibling!r}\n")

        nested = import_module_loader(str(tmp_path / "admin" / "users"))
        flat = import_module_loader(str(tmp_path / sibling))

        assert nested is not flat
        assert nested.index() == "admin/users"
        assert flat.index() == sibling

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ModuleNotFoundError, match="No controller module found"):
            import_module_loader(str(tmp_path / "missing"))

    def test_broken_file_not_cached(self, tmp_path: Path) -> None:
        source = tmp_path / "broken.py"
        source.write_text("raise RuntimeError('broken')\n")
        with pytest.raises(RuntimeError):
            import_module_loader(str(source))
        source.write_text("def index():\n    return 'fixed'\n")
        assert import_module_loader(str(source)).index() == "fixed"


class TestRequireRouteModule:
    def test_uses_import_loader(self, tmp_path: Path) -> None:
        (tmp_path / "home.py").write_text("def root():\n    return 'home'\n")
        route = _route(require_path=str(tmp_path / "home"))
        returned_route, module = require_route_module(route)
        assert returned_route is route
        assert module.root() == "home"

    def test_never_raises(self, tmp_path: Path) -> None:
        route = _route(require_path=str(tmp_path / "missing"))
        _, error = require_route_module(route)
        assert isinstance(error, ModuleLoadError)
