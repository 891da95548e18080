"""Layout resolution by longest matching path prefix.

Layouts are registered per group prefix while routes are being set up.
At render time the most specific prefix of the request path wins::

    resolver = LayoutResolver()
    resolver.set_layout("default")               # router-wide default
    resolver.set_layout("admin", prefix="/admin")
    resolver.resolve("/admin/dashboard")  # "admin"
    resolver.resolve("/about")            # "default"

Prefixes match as plain strings, not path segments: ``/admin`` is a
prefix of ``/administrators`` too.
"""

import logging

from wren.errors import ConfigurationError

logger = logging.getLogger("wren.templating")


class LayoutResolver:
    """Prefix -> layout registry plus a router-wide default."""

    __slots__ = ("_default", "_frozen", "_registry")

    def __init__(self) -> None:
        self._registry: dict[str, str] = {}
        self._default: str | None = None
        self._frozen = False

    def set_layout(self, name: str, *, prefix: str = "") -> None:
        """Register *name* for *prefix*, or as the default when *prefix* is empty.

        Registering the same prefix again replaces the earlier layout and
        moves the entry to the end of the registry.
        """
        if self._frozen:
            msg = f"Cannot set layout {name!r}: the layout registry is frozen."
            raise ConfigurationError(msg)
        if not prefix:
            self._default = name
            return
        self._registry.pop(prefix, None)
        self._registry[prefix] = name

    def freeze(self) -> None:
        self._frozen = True

    @property
    def default(self) -> str | None:
        return self._default

    @property
    def registry(self) -> dict[str, str]:
        """A copy of the prefix -> layout mapping, in registration order."""
        return dict(self._registry)

    def names(self) -> set[str]:
        """Every layout name that resolution can produce."""
        names = set(self._registry.values())
        if self._default is not None:
            names.add(self._default)
        return names

    def resolve(self, path: str) -> str | None:
        """Return the layout for *path*, or ``None`` for no layout.

        Among registered prefixes of *path* the longest wins; on equal
        length the most recently registered wins. Falls back to the
        default when nothing matches.
        """
        best: str | None = None
        best_length = -1
        for prefix, name in self._registry.items():
            # >= lets later registrations win ties
            if path.startswith(prefix) and len(prefix) >= best_length:
                best = name
                best_length = len(prefix)
        if best is None:
            best = self._default
        logger.debug("Layout for %r: %r", path, best)
        return best
