"""View rendering with optional layout wrapping.

Rendering order is fixed: the view renders first into a string, then
the layout renders with that string bound as ``content``. The view
never sees the layout's output.

Every ``str`` passed as a render option is HTML-escaped before the
template sees it, and wrapped in ``Markup`` so kida's autoescape does
not escape it a second time. Non-string values pass through unchanged.
"""

import html
import logging
from collections.abc import Callable, Mapping
from typing import Any

from kida import Environment
from kida.environment.exceptions import TemplateNotFoundError
from kida.template import Markup

from wren.errors import TemplateNotFound
from wren.layouts import LayoutResolver
from wren.templating.registry import COMPONENT, LAYOUT, VIEW, TemplateRegistry

logger = logging.getLogger("wren.templating")

# Option key that overrides layout resolution
LAYOUT_KEY = "layout"


def sanitize(options: Mapping[str, Any]) -> dict[str, Any]:
    """Escape every string value; leave everything else alone."""
    return {
        key: Markup(html.escape(value, quote=True)) if isinstance(value, str) else value
        for key, value in options.items()
    }


def component_warning(name: str) -> Markup:
    """Inline text shown in place of a missing component."""
    return Markup(html.escape(f"Warning: Component not found ({name})"))


class ViewRenderer:
    """Renders views, layouts, and components from one kida environment.

    Usage::

        renderer = ViewRenderer(env, registry, layouts)
        html = renderer.render("admin/dashboard", {"title": "Stats"}, path="/admin")
    """

    __slots__ = ("_env", "_layouts", "_registry")

    def __init__(
        self,
        env: Environment,
        registry: TemplateRegistry,
        layouts: LayoutResolver,
    ) -> None:
        self._env = env
        self._registry = registry
        self._layouts = layouts

    def effective_layout(self, options: Mapping[str, Any], path: str) -> str | None:
        """Pick the layout for this render.

        An explicit ``layout`` option wins (``False`` means none); a
        missing or ``None`` option defers to path-based resolution.
        """
        explicit = options.get(LAYOUT_KEY)
        if explicit is False:
            return None
        if explicit is not None:
            return str(explicit)
        return self._layouts.resolve(path)

    def render(self, view: str, options: Mapping[str, Any] | None = None, *, path: str) -> str:
        """Render *view*, wrapped in the effective layout for *path*."""
        options = dict(options or {})
        layout = self.effective_layout(options, path)
        options.pop(LAYOUT_KEY, None)

        context = sanitize(options)
        context["component"] = self._component_renderer(context)

        body = self._render(VIEW, view, context)
        if layout is None:
            return body

        layout_context = {**context, "content": Markup(body)}
        layout_context["component"] = self._component_renderer(layout_context)
        return self._render(LAYOUT, layout, layout_context)

    def component(self, name: str, context: Mapping[str, Any] | None = None) -> Markup:
        """Render a component, or an inline warning if it does not exist."""
        template_path = self._registry.find(COMPONENT, name)
        if template_path is None:
            logger.warning("Component not found: %r", name)
            return component_warning(name)
        context = dict(context or {})
        context["component"] = self._component_renderer(context)
        template = self._env.get_template(template_path)
        return Markup(template.render(context))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _component_renderer(self, context: dict[str, Any]) -> Callable[[str], Markup]:
        """Bind ``component()`` to the bindings of the template calling it."""

        def component(name: str) -> Markup:
            return self.component(name, context)

        return component

    def _render(self, kind: str, name: str, context: dict[str, Any]) -> str:
        template_path = self._registry.resolve(kind, name)
        try:
            template = self._env.get_template(template_path)
        except TemplateNotFoundError as exc:
            raise TemplateNotFound(kind, name) from exc
        return template.render(context)
