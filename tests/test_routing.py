"""Tests for wren.routing — templates, routes, and the route table."""

import pytest

from wren.errors import ConfigurationError
from wren.http.request import Request
from wren.routing.route import Route
from wren.routing.router import Router
from wren.routing.template import bind, compile_template, matches, param_names


async def _endpoint(request, send) -> str:
    return "handled"


def _request(path: str) -> Request:
    return Request.from_scope({"method": "GET", "path": path, "headers": []})


class TestParamNames:
    def test_none(self) -> None:
        assert param_names("/users") == ()

    def test_declaration_order(self) -> None:
        assert param_names("/orgs/:org/repos/:repo") == ("org", "repo")

    def test_underscores(self) -> None:
        assert param_names("/u/:user_id") == ("user_id",)


class TestMatches:
    def test_single_param(self) -> None:
        assert matches("/users/:id", "/users/42") == (True, {"id": "42"})

    def test_params_bound_in_order(self) -> None:
        ok, params = matches("/a/:x/b/:y/c/:z", "/a/1/b/2/c/3")
        assert ok
        assert list(params.items()) == [("x", "1"), ("y", "2"), ("z", "3")]

    def test_param_is_one_segment(self) -> None:
        assert matches("/users/:id", "/users/42/edit") == (False, {})
        assert matches("/users/:id", "/users/") == (False, {})

    def test_whole_path_must_match(self) -> None:
        assert matches("/users/:id", "/api/users/42") == (False, {})

    def test_no_params_is_exact_equality(self) -> None:
        assert matches("/about", "/about") == (True, {})
        assert matches("/about", "/about/") == (False, {})
        assert matches("/about", "/ABOUT") == (False, {})

    def test_literals_are_not_regex(self) -> None:
        assert matches("/files/:name.txt", "/files/readme.txt") == (True, {"name": "readme"})
        assert matches("/files/:name.txt", "/files/readmeXtxt") == (False, {})

    def test_colon_without_slash_is_literal(self) -> None:
        assert param_names("/a:b") == ()
        assert matches("/a:b", "/a:b") == (True, {})


class TestCompileTemplate:
    def test_requires_leading_slash(self) -> None:
        with pytest.raises(ConfigurationError, match="must start with"):
            compile_template("users/:id")

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="repeats"):
            compile_template("/a/:id/b/:id")

    def test_static_template_has_no_pattern(self) -> None:
        compiled = compile_template("/health")
        assert compiled.pattern is None
        assert compiled.names == ()


class TestBind:
    def test_writes_params(self) -> None:
        req = _request("/users/42")
        assert bind(compile_template("/users/:id"), req.url, req)
        assert req.params == {"id": "42"}

    def test_miss_leaves_params_alone(self) -> None:
        req = _request("/users")
        assert not bind(compile_template("/users/:id"), req.url, req)
        assert req.params == {}

    def test_overwrites_same_name_keeps_others(self) -> None:
        req = _request("/users/42")
        req.params.update({"id": "old", "extra": "kept"})
        bind(compile_template("/users/:id"), req.url, req)
        assert req.params == {"id": "42", "extra": "kept"}


class TestRoute:
    def test_create(self) -> None:
        route = Route.create("get", "/users/:id", _endpoint)
        assert route.method == "GET"
        assert route.path == "/users/:id"
        assert route.template.names == ("id",)


class TestRouter:
    def test_registration_order(self) -> None:
        router = Router()
        first = Route.create("GET", "/a", _endpoint)
        second = Route.create("GET", "/:x", _endpoint)
        router.add(first)
        router.add(second)
        assert router.routes_for("GET") == (first, second)
        assert len(router) == 2

    def test_methods_kept_apart(self) -> None:
        router = Router()
        router.add(Route.create("POST", "/a", _endpoint))
        assert router.routes_for("GET") == ()
        assert len(router.routes_for("POST")) == 1

    def test_supports(self) -> None:
        router = Router()
        assert router.supports("GET")
        assert router.supports("POST")
        assert not router.supports("DELETE")
        assert router.routes_for("DELETE") == ()

    def test_unsupported_method_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Unsupported method"):
            Router().add(Route.create("PUT", "/a", _endpoint))

    def test_no_adds_after_compile(self) -> None:
        router = Router()
        router.compile()
        with pytest.raises(RuntimeError):
            router.add(Route.create("GET", "/a", _endpoint))

    def test_routes_listing(self) -> None:
        router = Router()
        router.add(Route.create("POST", "/b", _endpoint))
        router.add(Route.create("GET", "/a", _endpoint))
        assert [(r.method, r.path) for r in router.routes] == [("GET", "/a"), ("POST", "/b")]
