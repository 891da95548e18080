"""Tests for wren.cli — CLI entrypoint, ``routes`` and ``check``."""

import sys
import types
from pathlib import Path

import pytest

from wren.app import App
from wren.cli import main
from wren.config import AppConfig


@pytest.fixture
def fake_app_module(monkeypatch: pytest.MonkeyPatch, site: Path) -> types.ModuleType:
    """Register a module holding a configured App on sys.modules."""
    app = App(config=AppConfig(template_dir=site / "app", static_dir=site / "public"))
    app.layout("default")
    app.get("/", lambda: "home")

    def show_user(id: str) -> str:
        return id

    app.get("/user/{id}", show_user)
    app.group("/admin", lambda r: r.layout("admin"))

    broken = App(config=AppConfig(template_dir=site / "app"))
    broken.layout("ghost")

    mod = types.ModuleType("_fake_wren_cli_app")
    mod.app = app  # type: ignore[attr-defined]
    mod.broken = broken  # type: ignore[attr-defined]
    mod.empty = App(config=AppConfig(template_dir=site / "app"))  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_wren_cli_app", mod)
    return mod


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_check_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_app(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_check_missing_app(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check"])
        assert exc_info.value.code == 2

    def test_bad_log_level(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "loud", "routes", "x:app"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "wren" in captured.out


@pytest.mark.usefixtures("fake_app_module")
class TestRoutesCommand:
    def test_lists_routes_and_layouts(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_wren_cli_app:app"])
        out = capsys.readouterr().out
        assert "METHOD" in out
        assert "/user/{id}" in out
        assert "show_user(id)" in out
        assert "<lambda>()" in out
        assert "(default) -> default" in out
        assert "/admin -> admin" in out

    def test_empty_app(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_wren_cli_app:empty"])
        assert "No routes registered." in capsys.readouterr().out

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "_fake_wren_cli_app:nope"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


@pytest.mark.usefixtures("fake_app_module")
class TestCheckCommand:
    def test_ok(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["check", "_fake_wren_cli_app:app"])
        out = capsys.readouterr().out
        assert out.startswith("OK: 2 routes")
        assert "3 layouts" in out

    def test_missing_layout_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["check", "_fake_wren_cli_app:broken"])
        assert exc_info.value.code == 1
        assert "ghost" in capsys.readouterr().err
