"""``wren check`` — startup validation command.

Loads the target App and freezes it, which indexes the template
directories and verifies every configured layout exists.
Exits with code 1 on a configuration error.
"""

import argparse
import sys

from wren.cli._resolve import resolve_app
from wren.errors import ConfigurationError
from wren.templating.registry import COMPONENT, LAYOUT, VIEW


def run_check(args: argparse.Namespace) -> None:
    """Validate templates and layouts for a wren app."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        app.check()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    registry = app.registry
    if registry is not None and app.config.validate_templates:
        counts = ", ".join(
            f"{len(registry.names(kind))} {kind}s" for kind in (VIEW, LAYOUT, COMPONENT)
        )
        print(f"OK: {len(app.routes)} routes, {counts}")
    else:
        print(f"OK: {len(app.routes)} routes")
