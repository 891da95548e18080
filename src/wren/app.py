"""Wren application class.

Mutable during setup (routes, groups, layouts, middleware). Frozen on
the first ``dispatch()``: templates are indexed, configured layouts are
validated, and the route table and layout registry become read-only.
"""

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import AbstractContextManager
from dataclasses import replace
from pathlib import Path
from typing import Any, NoReturn, overload

from wren._internal.types import Handler, Middleware, NotFoundHandler
from wren._internal.wsgi import StartResponse, WSGIEnviron, handle_wsgi
from wren.config import AppConfig
from wren.context import g, request_var
from wren.errors import ConfigurationError, Halt
from wren.http.request import Request
from wren.http.response import Response, redirect_response, to_response
from wren.layouts import LayoutResolver
from wren.middleware.chain import MiddlewareChain
from wren.routing.route import GroupContext, Route
from wren.routing.router import Router
from wren.static import StaticFiles
from wren.templating.integration import create_environment
from wren.templating.registry import LAYOUT, TemplateRegistry
from wren.templating.renderer import ViewRenderer

logger = logging.getLogger("wren.dispatch")

NOT_FOUND_BODY = "404 Not Found"


class App:
    """The wren application.

    Usage::

        app = App()
        app.layout("default")

        @app.get("/user/{id}")
        def user(id):
            return app.render("public/user", id=id)

        def admin(r: App) -> None:
            r.layout("admin")
            r.get("/dashboard", lambda: r.render("admin/dashboard"))

        app.group("/admin", admin)

        response = app.dispatch("GET", "/user/42")

    Thread safety:
        Registration is single-threaded setup code. The freeze
        transition uses a Lock + double-check so exactly one thread
        compiles the app if a host calls ``dispatch()`` from several
        threads on the first request. After that the route table and
        layout registry are only read.
    """

    __slots__ = (
        "_chain",
        "_freeze_lock",
        "_frozen",
        "_layouts",
        "_middleware_list",
        "_not_found_handler",
        "_registry",
        "_renderer",
        "_router",
        "_static",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._router = Router()
        self._layouts = LayoutResolver()
        self._middleware_list: list[Middleware] = []
        self._not_found_handler: NotFoundHandler | None = None
        self._frozen = False
        self._freeze_lock = threading.Lock()

        # Compiled state, set during freeze()
        self._chain = MiddlewareChain()
        self._registry: TemplateRegistry | None = None
        self._renderer: ViewRenderer | None = None
        self._static: StaticFiles | None = None

    # -- Route registration --

    @overload
    def get(self, pattern: str) -> Callable[[Handler], Handler]: ...
    @overload
    def get(self, pattern: str, handler: Handler) -> Route: ...

    def get(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a GET route. Without *handler*, acts as a decorator."""
        return self._add("GET", pattern, handler)

    @overload
    def post(self, pattern: str) -> Callable[[Handler], Handler]: ...
    @overload
    def post(self, pattern: str, handler: Handler) -> Route: ...

    def post(self, pattern: str, handler: Handler | None = None) -> Any:
        """Register a POST route. Without *handler*, acts as a decorator."""
        return self._add("POST", pattern, handler)

    def _add(self, method: str, pattern: str, handler: Handler | None) -> Any:
        if handler is not None:
            return self._router.register(method, pattern, handler)

        def decorator(func: Handler) -> Handler:
            self._router.register(method, pattern, func)
            return func

        return decorator

    @overload
    def group(self, prefix: str) -> AbstractContextManager[GroupContext]: ...
    @overload
    def group(self, prefix: str, body: Callable[["App"], Any]) -> None: ...

    def group(self, prefix: str, body: Callable[["App"], Any] | None = None) -> Any:
        """Register routes under *prefix*.

        With *body*, calls ``body(app)`` inside the group. Without it,
        returns a context manager::

            with app.group("/admin"):
                app.layout("admin")
                app.get("/dashboard", dashboard)

        The group's prefix and layout context end when the body returns.
        """
        if body is None:
            return self._router.scoped(prefix)
        with self._router.scoped(prefix):
            body(self)
        return None

    def layout(self, name: str) -> None:
        """Set the layout for the active group, or the app-wide default.

        Inside a group the layout applies to every request path that
        starts with the group's prefix, whichever routes serve them.
        """
        group = self._router.group
        if group is not None and group.prefix:
            self._layouts.set_layout(name, prefix=group.prefix)
            self._router.set_group_layout(name)
        else:
            self._layouts.set_layout(name)

    # -- Middleware, not-found, static --

    def use(self, middleware: Middleware) -> Middleware:
        """Append a middleware to the global chain. Usable as a decorator."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)
        return middleware

    def set_not_found(self, handler: NotFoundHandler) -> NotFoundHandler:
        """Handle unmatched requests with *handler*. Usable as a decorator.

        The handler runs through the middleware chain like a route
        handler. Unless it returns a ``Response``, the status is 404.
        """
        self._check_not_frozen()
        self._not_found_handler = handler
        return handler

    def set_static_folder(self, directory: str | Path | None) -> None:
        """Serve files under *directory* at the URL root. ``None`` disables."""
        self._check_not_frozen()
        self.config = replace(self.config, static_dir=directory)

    # -- Introspection --

    @property
    def routes(self) -> list[Route]:
        return self._router.routes

    @property
    def layouts(self) -> LayoutResolver:
        return self._layouts

    def iter_layouts(self) -> Iterator[tuple[str, str]]:
        """Yield ``(prefix, layout)`` pairs, the default first as prefix ``""``."""
        if self._layouts.default is not None:
            yield "", self._layouts.default
        yield from self._layouts.registry.items()

    @property
    def middleware(self) -> tuple[Middleware, ...]:
        return tuple(self._middleware_list)

    @property
    def registry(self) -> TemplateRegistry | None:
        """The template registry, available once the app is frozen."""
        return self._registry

    # -- Dispatch --

    def dispatch(self, method: str, path: str) -> Response:
        """Process one request and return its response.

        Static files short-circuit everything. Otherwise the first
        matching route's handler runs inside the middleware chain;
        unmatched requests go to the not-found handler.
        """
        self.freeze()

        request = Request.from_dispatch(method, path)
        token = request_var.set(request)
        try:
            if self._static is not None:
                response = self._static.serve(request.path)
                if response is not None:
                    return response
            try:
                return self._route(request)
            except Halt as halt:
                return halt.response
        finally:
            g._reset()
            request_var.reset(token)

    def _route(self, request: Request) -> Response:
        if not self._router.has_routes(request.method):
            return self._not_found(request)

        match = self._router.find(request.method, request.path)
        if match is None:
            return self._not_found(request)

        logger.debug(
            "%s %r matched %r with %r",
            request.method,
            request.path,
            match.route.pattern,
            match.params,
        )
        request_var.set(request.with_params(match.params))
        result = self._chain.run(lambda: match.route.handler(*match.params))
        return to_response(result)

    def _not_found(self, request: Request) -> Response:
        logger.info("No route for %s %r", request.method, request.raw_path)
        if self._not_found_handler is None:
            return Response(
                body=NOT_FOUND_BODY,
                status=404,
                content_type="text/plain; charset=utf-8",
            )
        return to_response(self._chain.run(self._not_found_handler), status=404)

    # -- Handler helpers --

    def render(self, view: str, options: dict[str, Any] | None = None, /, **context: Any) -> str:
        """Render *view* inside the effective layout and return the HTML.

        Options come from *options* and keyword arguments (keywords win).
        ``layout="name"`` forces a layout, ``layout=False`` disables it;
        otherwise the layout is resolved from the current request path.
        """
        self.freeze()
        assert self._renderer is not None
        merged = {**(options or {}), **context}
        try:
            path = request_var.get().path
        except LookupError:
            path = ""
        return self._renderer.render(view, merged, path=path)

    def component(self, name: str) -> str:
        """Render a component outside any template (no bindings)."""
        self.freeze()
        assert self._renderer is not None
        return self._renderer.component(name)

    def redirect(self, url: str, status: int = 302) -> NoReturn:
        """Send the client to *url* and stop handling the current request."""
        raise Halt(redirect_response(url, status))

    # -- WSGI --

    def __call__(self, environ: WSGIEnviron, start_response: StartResponse) -> Iterable[bytes]:
        """WSGI entry point. Lets any WSGI server host the app."""
        return handle_wsgi(self, environ, start_response)

    # -- Lifecycle --

    def freeze(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        # 1. Templates: index and validate configured layouts
        registry = TemplateRegistry(self.config)
        if self.config.validate_templates:
            registry.scan()
            missing = sorted(
                name for name in self._layouts.names() if registry.find(LAYOUT, name) is None
            )
            if missing:
                msg = (
                    f"Layout template(s) not found: {', '.join(missing)}. "
                    f"Looked in {registry.root / self.config.layouts_dir}"
                )
                raise ConfigurationError(msg)

        env = create_environment(self.config)
        self._registry = registry
        self._renderer = ViewRenderer(env, registry, self._layouts)

        # 2. Capture middleware as an immutable chain
        self._chain = MiddlewareChain(self._middleware_list)

        # 3. Static root
        if self.config.static_dir is not None:
            self._static = StaticFiles(self.config.static_dir)

        # 4. Read-only from here on
        self._router.freeze()
        self._layouts.freeze()
        self._frozen = True

    def check(self) -> None:
        """Freeze the app, raising ``ConfigurationError`` on a bad setup."""
        self.freeze()

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started dispatching. "
                "Register routes, middleware, and layouts before the first request."
            )
            raise ConfigurationError(msg)
