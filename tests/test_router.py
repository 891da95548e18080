"""Tests for wren.routing.router — ordered per-method route table."""

import pytest

from wren.errors import ConfigurationError
from wren.routing.route import Route, RouteMatch
from wren.routing.router import Router


def _handler() -> str:
    return "ok"


def _other() -> str:
    return "other"


class TestRegister:
    def test_returns_route(self) -> None:
        router = Router()
        route = router.register("GET", "/about", _handler)
        assert route == Route("GET", "/about", _handler)

    def test_trailing_slash_trimmed(self) -> None:
        router = Router()
        assert router.register("GET", "/about/", _handler).pattern == "/about"

    def test_root_normalizes_to_empty(self) -> None:
        router = Router()
        assert router.register("GET", "/", _handler).pattern == ""

    def test_method_is_uppercased(self) -> None:
        router = Router()
        assert router.register("post", "/submit", _handler).method == "POST"

    def test_rejects_unsupported_method(self) -> None:
        router = Router()
        with pytest.raises(ConfigurationError, match="Unsupported method"):
            router.register("DELETE", "/x", _handler)

    def test_rejects_non_callable(self) -> None:
        router = Router()
        with pytest.raises(ConfigurationError, match="not callable"):
            router.register("GET", "/x", "nope")  # type: ignore[arg-type]

    def test_rejects_after_freeze(self) -> None:
        router = Router()
        router.freeze()
        with pytest.raises(ConfigurationError, match="frozen"):
            router.register("GET", "/x", _handler)

    def test_routes_in_registration_order(self) -> None:
        router = Router()
        router.register("GET", "/a", _handler)
        router.register("GET", "/b", _handler)
        assert [r.pattern for r in router.routes] == ["/a", "/b"]


class TestFind:
    def test_match_with_params(self) -> None:
        router = Router()
        route = router.register("GET", "/user/{id}", _handler)
        assert router.find("GET", "/user/42") == RouteMatch(route=route, params=("42",))

    def test_method_is_separate(self) -> None:
        router = Router()
        router.register("POST", "/submit", _handler)
        assert router.find("GET", "/submit") is None

    def test_no_match_returns_none(self) -> None:
        router = Router()
        router.register("GET", "/about", _handler)
        assert router.find("GET", "/contact") is None

    def test_first_match_wins(self) -> None:
        router = Router()
        router.register("GET", "/user/{id}", _handler)
        router.register("GET", "/user/me", _other)
        match = router.find("GET", "/user/me")
        assert match is not None
        assert match.route.handler is _handler

    def test_first_match_wins_reversed(self) -> None:
        router = Router()
        router.register("GET", "/user/me", _other)
        router.register("GET", "/user/{id}", _handler)
        match = router.find("GET", "/user/me")
        assert match is not None
        assert match.route.handler is _other

    def test_has_routes(self) -> None:
        router = Router()
        router.register("GET", "/", _handler)
        assert router.has_routes("GET")
        assert router.has_routes("get")
        assert not router.has_routes("POST")


class TestGroups:
    def test_prefix_applied(self) -> None:
        router = Router()
        with router.scoped("/admin"):
            route = router.register("GET", "/x", _handler)
        assert route.pattern == "/admin/x"

    def test_prefix_restored_after_group(self) -> None:
        router = Router()
        router.register("GET", "/a", _handler)
        with router.scoped("/admin"):
            router.register("GET", "/x", _handler)
        router.register("GET", "/b", _handler)
        assert [r.pattern for r in router.routes] == ["/a", "/admin/x", "/b"]
        assert router.prefix == ""

    def test_nested_groups_concatenate(self) -> None:
        router = Router()
        with router.scoped("/api"):
            with router.scoped("/v1/"):
                inner = router.register("GET", "/users", _handler)
            outer = router.register("GET", "/health", _handler)
        assert inner.pattern == "/api/v1/users"
        assert outer.pattern == "/api/health"

    def test_group_root_route(self) -> None:
        router = Router()
        with router.scoped("/admin"):
            route = router.register("GET", "/", _handler)
        assert route.pattern == "/admin"

    def test_restored_when_body_raises(self) -> None:
        router = Router()
        with pytest.raises(RuntimeError), router.scoped("/admin"):
            raise RuntimeError("boom")
        assert router.prefix == ""
        assert router.group is None

    def test_group_layout_marked(self) -> None:
        router = Router()
        with router.scoped("/admin"):
            context = router.set_group_layout("admin")
            assert router.group == context
            assert context.layout == "admin"
            assert context.prefix == "/admin"

    def test_new_group_starts_without_layout(self) -> None:
        router = Router()
        with router.scoped("/admin"):
            router.set_group_layout("admin")
            with router.scoped("/reports"):
                assert router.group is not None
                assert router.group.layout is None
            assert router.group.layout == "admin"

    def test_set_group_layout_outside_group(self) -> None:
        router = Router()
        with pytest.raises(ConfigurationError):
            router.set_group_layout("admin")
