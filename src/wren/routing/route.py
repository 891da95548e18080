"""Route, RouteMatch, and GroupContext frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Methods the route table accepts
METHODS: frozenset[str] = frozenset({"GET", "POST"})


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``pattern`` is the full pattern after the active group prefix was
    applied and trailing slashes were trimmed.
    """

    method: str
    pattern: str
    handler: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match.

    Parameters are positional, in the order their placeholders appear
    in the pattern.
    """

    route: Route
    params: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class GroupContext:
    """Registration state while a ``group()`` body runs.

    Pushed on entry, popped on exit; never outlives the call.
    """

    prefix: str
    layout: str | None = None
