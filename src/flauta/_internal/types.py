"""Shared type aliases used across flauta modules."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Route handler — user-defined function with variable signature
Handler: TypeAlias = Callable[..., Any]

# Controller module — a module object, any object with handler attributes,
# or a mapping of handler name to handler
Module: TypeAlias = Any

# Module loader — given a require path, return the controller module or raise
ModuleLoader: TypeAlias = Callable[[str], Module]

# Path helper — optional placeholder values in, concrete URL path out
PathGenerator: TypeAlias = Callable[..., str]

PathProperties: TypeAlias = Mapping[str, Any]
