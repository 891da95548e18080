"""Application configuration.

AppConfig is a frozen dataclass. Settings are plain attributes, fixed
once the app is constructed.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(template_dir="site", static_dir="assets", debug=True)

    Template names are logical: ``render("admin/dashboard")`` loads
    ``<template_dir>/<views_dir>/admin/dashboard<template_suffix>``.
    """

    debug: bool = False

    # Templates
    template_dir: str | Path = "app"
    views_dir: str = "views"
    layouts_dir: str = "layouts"
    components_dir: str = "components"
    template_suffix: str = ".html"
    autoescape: bool = True
    validate_templates: bool = True  # Index templates and check layouts at freeze time

    # Static files (served from the URL root, bypassing routing)
    static_dir: str | Path | None = "public"

    # Logging (applied by the CLI; the library never installs handlers)
    log_level: str = "info"
