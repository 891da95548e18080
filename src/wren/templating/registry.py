"""Template registry keyed by logical name.

Indexes the view, layout, and component directories once at startup so
a misconfigured layout fails when the app freezes rather than halfway
through a request. Logical names drop the directory and suffix::

    app/views/admin/dashboard.html   -> view "admin/dashboard"
    app/layouts/default.html         -> layout "default"
    app/components/header.html       -> component "header"
"""

import logging
from pathlib import Path

from wren.config import AppConfig
from wren.errors import TemplateNotFound

logger = logging.getLogger("wren.templating")

VIEW = "view"
LAYOUT = "layout"
COMPONENT = "component"
KINDS = (VIEW, LAYOUT, COMPONENT)


class TemplateRegistry:
    """Logical template names for each kind, mapped to loader paths."""

    __slots__ = ("_dirs", "_index", "_indexed", "_rescan_on_miss", "_root", "_suffix")

    def __init__(self, config: AppConfig) -> None:
        self._root = Path(config.template_dir)
        self._suffix = config.template_suffix
        self._dirs: dict[str, str] = {
            VIEW: config.views_dir,
            LAYOUT: config.layouts_dir,
            COMPONENT: config.components_dir,
        }
        self._rescan_on_miss = config.debug
        self._index: dict[str, dict[str, str]] = {kind: {} for kind in KINDS}
        self._indexed = False

    @property
    def root(self) -> Path:
        return self._root

    def loader_path(self, kind: str, name: str) -> str:
        """The path the template loader uses for *name*, relative to the root."""
        return f"{self._dirs[kind]}/{name.strip('/')}{self._suffix}"

    def scan(self) -> None:
        """Rebuild the index from disk."""
        for kind in KINDS:
            directory = self._root / self._dirs[kind]
            found: dict[str, str] = {}
            if directory.is_dir():
                for file in sorted(directory.rglob(f"*{self._suffix}")):
                    if not file.is_file():
                        continue
                    relative = file.relative_to(directory).as_posix()
                    name = relative[: len(relative) - len(self._suffix)]
                    found[name] = self.loader_path(kind, name)
            self._index[kind] = found
        self._indexed = True
        logger.debug(
            "Indexed %d views, %d layouts, %d components under %s",
            len(self._index[VIEW]),
            len(self._index[LAYOUT]),
            len(self._index[COMPONENT]),
            self._root,
        )

    def names(self, kind: str) -> tuple[str, ...]:
        """Logical names of every indexed template of *kind*, sorted."""
        return tuple(sorted(self._index[kind]))

    def resolve(self, kind: str, name: str) -> str:
        """Return the loader path for *name*.

        Raises ``TemplateNotFound`` if it is not indexed. In debug mode
        the directories are rescanned once first, so templates added
        while the app runs are picked up.
        """
        key = name.strip("/")
        if not self._indexed:
            # Never scanned: check the filesystem directly
            path = self.loader_path(kind, key)
            if (self._root / path).is_file():
                return path
            raise TemplateNotFound(kind, key)
        path = self._index[kind].get(key)
        if path is None and self._rescan_on_miss:
            self.scan()
            path = self._index[kind].get(key)
        if path is None:
            raise TemplateNotFound(kind, key, self.names(kind))
        return path

    def find(self, kind: str, name: str) -> str | None:
        """Like ``resolve()`` but returns ``None`` instead of raising."""
        try:
            return self.resolve(kind, name)
        except TemplateNotFound:
            return None
