"""Shared pytest configuration for flauta examples.

Provides the ``example_routes`` fixture that loads a fresh routes module
from the ``routes.py`` file in the same directory as the test.  Each call
re-executes routes.py in an isolated module namespace.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_routes(request: pytest.FixtureRequest):
    """Load the sibling routes.py next to the test file."""
    routes_path = Path(request.path).parent / "routes.py"
    module_name = f"example_{routes_path.parent.name}_routes"
    spec = importlib.util.spec_from_file_location(module_name, routes_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def example_routes_path(request: pytest.FixtureRequest) -> Path:
    return Path(request.path).parent / "routes.py"
