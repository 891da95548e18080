"""Wren CLI — route listing and startup validation.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import logging
import sys

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — a small router for server-rendered web apps.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Logging level for wren's loggers",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes and layouts")
    routes_parser.add_argument(
        "app",
        help="Module or .py file, optionally with :name (e.g. myapp:app, site/app.py)",
    )

    # -- wren check -------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate templates and layouts")
    check_parser.add_argument(
        "app",
        help="Module or .py file, optionally with :name (e.g. myapp:app, site/app.py)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from wren.cli._check import run_check

        run_check(args)
