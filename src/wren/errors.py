"""Wren exception hierarchy.

Shared across the route table, renderer, and dispatcher so every module
raises and catches the same types. Route-not-found has no exception
class: an unmatched request is an outcome, not an error.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wren.http.response import Response


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when app configuration is invalid.

    Typically raised during ``App.freeze()`` at startup, or when a route
    is registered after the app has started dispatching.
    """


class TemplateNotFound(ConfigurationError):  # noqa: N818
    """A view or layout template does not exist under the template root.

    Fatal for the current request. Components never raise this; a
    missing component renders an inline warning instead.
    """

    def __init__(self, kind: str, name: str, known: tuple[str, ...] = ()) -> None:
        self.kind = kind
        self.name = name
        self.known = known
        msg = f"{kind.capitalize()} template {name!r} not found."
        if known:
            msg += f" Known {kind}s: {', '.join(known)}"
        super().__init__(msg)


class Halt(WrenError):  # noqa: N818
    """Stop processing the current request and send ``response``.

    Raised by ``App.redirect()``. The dispatcher catches it and returns
    the carried response; no further middleware or handler code runs.
    """

    def __init__(self, response: Response) -> None:
        self.response = response
        super().__init__(f"halted with status {response.status}")
