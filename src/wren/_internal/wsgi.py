"""WSGI adapter.

The only component that touches raw WSGI. Extracts the method and path
from the environ, dispatches, and writes the response back through
``start_response``.
"""

from collections.abc import Callable, Iterable, MutableMapping
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from wren.app import App

WSGIEnviron: TypeAlias = MutableMapping[str, Any]
StartResponse: TypeAlias = Callable[..., Any]


def status_line(status: int) -> str:
    """``200`` -> ``"200 OK"``; unknown codes keep a bare number."""
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return f"{status} Unknown"


def request_path(environ: WSGIEnviron) -> str:
    """Decode ``PATH_INFO`` the way PEP 3333 encodes it."""
    raw = environ.get("PATH_INFO") or "/"
    return raw.encode("latin-1").decode("utf-8", errors="replace")


def handle_wsgi(app: App, environ: WSGIEnviron, start_response: StartResponse) -> Iterable[bytes]:
    """Dispatch one WSGI request through *app*."""
    method = environ.get("REQUEST_METHOD", "GET")
    response = app.dispatch(method, request_path(environ))

    body = response.body_bytes
    headers = [("Content-Type", response.content_type)]
    extra = [(name, value) for name, value in response.headers if name.lower() != "content-length"]
    headers.extend(extra)
    headers.append(("Content-Length", str(len(body))))

    start_response(status_line(response.status), headers)
    return [body]
