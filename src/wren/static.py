"""Static file shortcut.

Checked before routing: if the request path names a regular file under
the static root, the file is served as-is and routing, middleware, and
layouts are skipped entirely. Anything else falls through.

Security: resolves symlinks and verifies the final path is within the
configured directory to prevent path traversal.
"""

import logging
import mimetypes
from pathlib import Path

from wren.http.response import Response

logger = logging.getLogger("wren.static")


class StaticFiles:
    """Serve files from a directory mounted at the URL root.

    Usage::

        static = StaticFiles("./public")
        response = static.serve("/css/site.css")  # Response or None
    """

    __slots__ = ("_directory",)

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).resolve()

    @property
    def directory(self) -> Path:
        return self._directory

    def lookup(self, path: str) -> Path | None:
        """Return the file *path* maps to, or ``None`` to fall through."""
        relative = path.lstrip("/")
        if not relative:
            return None

        # A NUL byte or an over-long name makes the OS calls fail; such a
        # path names no file.
        try:
            file_path = (self._directory / relative).resolve()
            if not file_path.is_relative_to(self._directory):
                logger.debug("Static path %r escapes %s; falling through", path, self._directory)
                return None
            if not file_path.is_file():
                return None
        except (OSError, ValueError):
            logger.debug("Static path %r is not a valid file name; falling through", path)
            return None
        return file_path

    def serve(self, path: str) -> Response | None:
        """Build a response for *path*, or ``None`` when no file matches."""
        file_path = self.lookup(path)
        if file_path is None:
            return None
        logger.debug("Serving static file %s", file_path)
        return self._serve_file(file_path)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _serve_file(self, file_path: Path) -> Response:
        """Read a file and build a response."""
        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"

        body = file_path.read_bytes()

        return Response(body=body, content_type=content_type).with_header(
            "Content-Length", str(len(body))
        )
