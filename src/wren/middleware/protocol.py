"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    def my_mw(next: Next) -> Any: ...

No base class required. The chain checks the shape, not the lineage.

``next()`` runs the rest of the chain and returns whatever the handler
(or a later middleware) returned, so middleware can act before and
after. Returning without calling ``next()`` stops the request there.
The current request is available through ``wren.context.get_request()``.
"""

from typing import Any, Protocol

from wren._internal.types import Next


class Middleware(Protocol):
    """Protocol for wren middleware.

    Accepts both functions and callable objects::

        # Function middleware
        def timing(next: Next) -> Any:
            start = time.monotonic()
            result = next()
            g.elapsed = time.monotonic() - start
            return result

        # Class middleware
        class RequireLogin:
            def __call__(self, next: Next) -> Any:
                if "user" not in g:
                    app.redirect("/login")
                return next()
    """

    def __call__(self, next: Next) -> Any: ...


__all__ = ["Middleware", "Next"]
