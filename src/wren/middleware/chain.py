"""Continuation-passing middleware chain.

Middleware *i* is called with a continuation that calls middleware
*i + 1*, and the last continuation calls the final action. Nothing is
scheduled: the whole chain is ordinary nested calls on the caller's stack.
"""

from collections.abc import Callable, Iterator, Sequence
from typing import Any

from wren.middleware.protocol import Middleware


class MiddlewareChain:
    """An ordered, global list of middleware shared by every route."""

    __slots__ = ("_middleware",)

    def __init__(self, middleware: Sequence[Middleware] = ()) -> None:
        self._middleware: tuple[Middleware, ...] = tuple(middleware)

    def __len__(self) -> int:
        return len(self._middleware)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(self._middleware)

    def run(self, final: Callable[[], Any]) -> Any:
        """Run every middleware around *final* and return the response value.

        A middleware that returns something replaces the result of the
        rest of the chain. One that calls its continuation and returns
        ``None`` leaves the handler's result in place. A middleware that
        never calls its continuation prevents *final* and all later
        middleware from running.
        """
        middleware = self._middleware
        handled: list[Any] = []

        def call(index: int) -> Any:
            if index == len(middleware):
                result = final()
                handled.append(result)
                return result
            return middleware[index](lambda: call(index + 1))

        result = call(0)
        if result is None and handled:
            return handled[-1]
        return result
