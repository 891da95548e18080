"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response, so handlers and middleware
can adjust a response without mutating shared state.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the last header value set for *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in reversed(self.headers):
            if key.lower() == lowered:
                return value
        return default

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as bytes."""
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")

    @property
    def text(self) -> str:
        """Body decoded as text."""
        if isinstance(self.body, str):
            return self.body
        return self.body.decode("utf-8", errors="replace")


def redirect_response(url: str, status: int = 302) -> Response:
    """Build an empty response pointing the client at *url*."""
    return Response(body="", status=status).with_header("Location", url)


def to_response(value: Any, *, status: int = 200) -> Response:
    """Coerce a handler's return value into a ``Response``.

    - ``Response`` is returned unchanged.
    - ``str`` / ``bytes`` become the body of an HTML response.
    - ``None`` (nothing produced) becomes an empty body.
    """
    match value:
        case Response():
            return value
        case None:
            return Response(body="", status=status)
        case str() | bytes():
            return Response(body=value, status=status)
        case _:
            msg = (
                f"Handler returned {type(value).__name__}; expected str, bytes, "
                "Response, or None."
            )
            raise TypeError(msg)
