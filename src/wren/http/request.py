"""The request as seen by the router.

The host transport supplies only a method and a path. The dispatcher
builds a frozen ``Request`` from those, then replaces it with one
carrying ``path_params`` once a route matches.
"""

from dataclasses import dataclass, replace


def normalize_path(path: str) -> str:
    """Trim trailing slashes. The root path ``/`` normalizes to ``""``."""
    return path.rstrip("/")


@dataclass(frozen=True, slots=True)
class Request:
    """A single incoming request.

    ``path`` is the normalized request path; ``raw_path`` is what the
    host passed to ``dispatch()``.
    """

    method: str
    path: str
    raw_path: str = ""
    path_params: tuple[str, ...] = ()

    @classmethod
    def from_dispatch(cls, method: str, path: str) -> "Request":
        """Build a request from the dispatcher's inputs."""
        return cls(method=method.upper(), path=normalize_path(path), raw_path=path)

    def with_params(self, params: tuple[str, ...]) -> "Request":
        """Return a copy carrying the matched route's parameters."""
        return replace(self, path_params=params)
