"""Shared fixtures: a throwaway site with views, layouts, components, and static files."""

from pathlib import Path

import pytest

from wren.app import App
from wren.config import AppConfig

TEMPLATES: dict[str, str] = {
    "views/home.html": "<p>Home</p>",
    "views/greet.html": "<p>Hello {{ name }}</p>",
    "views/user.html": "<p>User {{ id }}</p>",
    "views/count.html": "<p>{{ count + 1 }}</p>",
    "views/admin/dashboard.html": "<p>Dashboard</p>",
    "views/with_component.html": '<div>{{ component("badge") }}</div>',
    "views/with_greeting.html": '<div>{{ component("greeting") }}</div>',
    "views/missing_component.html": '<div>{{ component("nope") }}</div>',
    "views/error.html": "<p>Nothing here</p>",
    "layouts/default.html": '<main class="default">{{ content }}</main>',
    "layouts/admin.html": '<main class="admin">{{ component("badge") }}{{ content }}</main>',
    "layouts/titled.html": "<title>{{ title }}</title><main>{{ content }}</main>",
    "components/badge.html": '<span class="badge">badge</span>',
    "components/greeting.html": "<span>{{ name }}</span>",
}


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A site root holding ``app/`` templates and ``public/`` static files."""
    for relative, source in TEMPLATES.items():
        path = tmp_path / "app" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source)

    public = tmp_path / "public"
    (public / "css").mkdir(parents=True)
    (public / "css" / "site.css").write_text("body { color: red; }")
    (public / "robots.txt").write_text("User-agent: *")
    (public / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return tmp_path


@pytest.fixture
def config(site: Path) -> AppConfig:
    return AppConfig(template_dir=site / "app", static_dir=site / "public")


@pytest.fixture
def app(config: AppConfig) -> App:
    """A fresh, unfrozen App wired to the fixture site."""
    return App(config=config)
