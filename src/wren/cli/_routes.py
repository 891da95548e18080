"""``wren routes`` lists registered routes and layouts.

Loads the target App and prints every route in registration order (the
order matching uses), then the layout table.
"""

import argparse
import sys

from wren.cli._resolve import resolve_app
from wren.routing.matcher import parameter_names
from wren.routing.route import Route


def run_routes(args: argparse.Namespace) -> None:
    """Print METHOD, PATH, and HANDLER for each route, then the layouts."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.routes
    if not routes:
        print("No routes registered.")
    else:
        rows = [(route.method, route.pattern or "/", _describe(route)) for route in routes]
        max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header
        fmt = f"{{:<6}}  {{:<{max_path}}}  {{}}"
        print(fmt.format("METHOD", "PATH", "HANDLER"))
        sep_len = 6 + max_path + 4 + max(len(r[2]) for r in rows)
        print("-" * min(sep_len, 80))
        for row in rows:
            print(fmt.format(*row))

    layouts = list(app.iter_layouts())
    if layouts:
        print()
        print("LAYOUTS")
        for prefix, name in layouts:
            print(f"  {prefix or '(default)'} -> {name}")


def _describe(route: Route) -> str:
    """Handler name with the path parameters it receives, e.g. ``show_user(id)``."""
    name = getattr(route.handler, "__name__", repr(route.handler))
    return f"{name}({', '.join(parameter_names(route.pattern))})"
