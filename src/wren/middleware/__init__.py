"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    def mw(next: Next) -> Any

Middleware is global to the app and wraps both matched routes and the
not-found handler. Static files bypass it.
"""

from wren.middleware.chain import MiddlewareChain
from wren.middleware.protocol import Middleware, Next

__all__ = [
    "Middleware",
    "MiddlewareChain",
    "Next",
]
