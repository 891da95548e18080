"""Wren — a small synchronous router for server-rendered web apps.

Matches a request against registered routes, runs a global middleware
chain, and renders kida views inside path-scoped layouts.

Basic usage::

    from wren import App

    app = App()
    app.layout("default")

    @app.get("/")
    def home():
        return app.render("public/home", title="Home")

    response = app.dispatch("GET", "/")

Hosting: ``App`` is a WSGI callable, so any WSGI server can serve it.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "Halt",
    "Middleware",
    "Next",
    "Request",
    "Response",
    "TemplateNotFound",
    "WrenError",
    "g",
    "get_request",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "App":
        from wren.app import App

        return App

    if name == "AppConfig":
        from wren.config import AppConfig

        return AppConfig

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name in ("Middleware", "Next"):
        from wren.middleware import protocol as _mw

        return getattr(_mw, name)

    if name in ("g", "get_request"):
        from wren import context as _ctx

        return getattr(_ctx, name)

    if name in ("ConfigurationError", "Halt", "TemplateNotFound", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
