"""Per-request state for handlers and middleware.

``App.dispatch()`` handles one request at a time on the calling thread.
Before routing it stores the ``Request`` in ``request_var``. After a
route matches it stores a copy that carries the path parameters. When
dispatch returns, both the request and ``g`` are cleared.

Middleware is called with nothing but its continuation, so
``get_request()`` is how it finds out what is being handled::

    def require_login(next):
        if get_request().path.startswith("/admin") and "user" not in g:
            app.redirect("/login")
        return next()

Both live in ContextVars, so two threads dispatching at once never see
each other's request.
"""

from contextvars import ContextVar
from typing import Any

from wren.http.request import Request

request_var: ContextVar[Request] = ContextVar("wren_request")
"""The request being dispatched."""

_globals_var: ContextVar[dict[str, Any]] = ContextVar("wren_g")


def get_request() -> Request:
    """Return the request being dispatched.

    Raises ``LookupError`` outside ``App.dispatch()``.
    """
    return request_var.get()


def _namespace() -> dict[str, Any]:
    try:
        return _globals_var.get()
    except LookupError:
        namespace: dict[str, Any] = {}
        _globals_var.set(namespace)
        return namespace


class RequestGlobals:
    """Attribute bag for passing values from middleware to handlers.

    ``g.user = ...`` in a middleware is visible as ``g.user`` in the
    handler it wraps, and gone by the next dispatch.
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        try:
            return _namespace()[name]
        except KeyError:
            msg = f"g.{name} is not set for this request"
            raise AttributeError(msg) from None

    def __setattr__(self, name: str, value: Any) -> None:
        _namespace()[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del _namespace()[name]
        except KeyError:
            msg = f"g.{name} is not set for this request"
            raise AttributeError(msg) from None

    def __contains__(self, name: str) -> bool:
        return name in _namespace()

    def get(self, name: str, default: Any = None) -> Any:
        return _namespace().get(name, default)

    def _reset(self) -> None:
        """Drop every attribute. Called when a dispatch finishes."""
        _globals_var.set({})


g = RequestGlobals()
