"""Flauta exception hierarchy.

Shared across the DSL, the resolver, the registrar and the CLI so every
module raises and catches the same types.

Per-route load failures (``LoadError`` and subclasses) are never raised by
the resolver.  They are stored as the second element of a route/module
tuple and partitioned into ``ResolvedRouter.invalid_routes``.
"""

MISSING_HANDLER_MESSAGE = "Controller module missing the handler function"


class FlautaError(Exception):
    """Base for all flauta-specific errors."""


class ConfigurationError(FlautaError):
    """Raised when a route table target cannot be used.

    Typically raised while the CLI resolves the router module it was
    pointed at.
    """


class LoadError(FlautaError):
    """A failed attempt to load or validate a route's controller module."""


class ModuleLoadError(LoadError):
    """The route's require path could not be loaded by the module loader.

    The loader's original exception is kept as ``__cause__``.
    """


class MissingHandlerError(LoadError):
    """The controller module loaded but does not export the route's handler."""

    def __init__(self, message: str = MISSING_HANDLER_MESSAGE) -> None:
        super().__init__(message)
