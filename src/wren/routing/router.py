"""Route table with prefix-scoped groups.

Routes are stored per HTTP method in registration order. Lookup scans
that order and returns the first pattern that matches, regardless of
how specific later patterns are.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from wren.errors import ConfigurationError
from wren.http.request import normalize_path
from wren.routing.matcher import match_path
from wren.routing.route import METHODS, GroupContext, Route, RouteMatch


class Router:
    """Ordered per-method route table.

    Usage::

        router = Router()
        router.register("GET", "/users/{id}", show_user)
        with router.scoped("/admin"):
            router.register("GET", "/dashboard", dashboard)  # /admin/dashboard
        router.freeze()
        match = router.find("GET", "/users/42")  # RouteMatch(..., params=("42",))
    """

    __slots__ = ("_frozen", "_groups", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, list[Route]] = {}
        self._groups: list[GroupContext] = []
        self._frozen = False

    # -- Registration --

    @property
    def prefix(self) -> str:
        """The prefix applied to routes registered right now."""
        return self._groups[-1].prefix if self._groups else ""

    @property
    def group(self) -> GroupContext | None:
        """The innermost active group, or ``None`` outside any group."""
        return self._groups[-1] if self._groups else None

    def register(self, method: str, pattern: str, handler: Callable[..., Any]) -> Route:
        """Store a route under the active group prefix."""
        if self._frozen:
            msg = (
                f"Cannot register {method} {pattern!r}: the route table is frozen. "
                "Register routes before the first dispatch."
            )
            raise ConfigurationError(msg)
        method = method.upper()
        if method not in METHODS:
            msg = f"Unsupported method {method!r}. Supported: {', '.join(sorted(METHODS))}"
            raise ConfigurationError(msg)
        if not callable(handler):
            msg = f"Handler for {method} {pattern!r} is not callable: {handler!r}"
            raise ConfigurationError(msg)

        route = Route(method, normalize_path(self.prefix + pattern), handler)
        self._routes.setdefault(method, []).append(route)
        return route

    @contextmanager
    def scoped(self, prefix: str) -> Iterator[GroupContext]:
        """Extend the active prefix for the duration of the ``with`` block.

        Nested scopes concatenate. The previous context is restored on
        exit, including when the block raises.
        """
        context = GroupContext(prefix=self.prefix + normalize_path(prefix))
        self._groups.append(context)
        try:
            yield context
        finally:
            self._groups.pop()

    def set_group_layout(self, name: str) -> GroupContext:
        """Record *name* as the innermost group's layout."""
        if not self._groups:
            msg = "set_group_layout() called outside a group"
            raise ConfigurationError(msg)
        context = GroupContext(prefix=self._groups[-1].prefix, layout=name)
        self._groups[-1] = context
        return context

    def freeze(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._frozen = True

    # -- Lookup --

    def has_routes(self, method: str) -> bool:
        """True if at least one route is registered for *method*."""
        return bool(self._routes.get(method.upper()))

    def find(self, method: str, path: str) -> RouteMatch | None:
        """Return the first route matching *path*, or ``None``.

        *path* must already be normalized.
        """
        for route in self._routes.get(method.upper(), ()):
            params = match_path(route.pattern, path)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    @property
    def routes(self) -> list[Route]:
        """All registered routes, grouped by method in registration order."""
        return [route for routes in self._routes.values() for route in routes]
