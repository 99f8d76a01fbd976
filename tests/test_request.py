"""Tests for wren.http.request and wren.http.views."""

import dataclasses

import pytest

from wren.http.request import Request
from wren.http.views import GetRequest, PostRequest


def _scope(
    method: str = "GET",
    path: str = "/",
    query: bytes = b"",
    headers: list[tuple[bytes, bytes]] | None = None,
) -> dict:
    return {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": query,
        "headers": headers or [],
    }


def _receive_once(body: bytes):
    sent = {"done": False}

    async def receive():
        if sent["done"]:
            return {"type": "http.disconnect"}
        sent["done"] = True
        return {"type": "http.request", "body": body, "more_body": False}

    return receive


async def _never_called():
    raise AssertionError("GET must not read the body")


class TestRequestFromScope:
    def test_metadata(self) -> None:
        req = Request.from_scope(
            _scope(
                path="/users/42",
                query=b"x=1",
                headers=[
                    (b"host", b"example.com"),
                    (b"user-agent", b"pytest"),
                    (b"cookie", b"a=1; b=2"),
                ],
            )
        )
        assert req.method == "GET"
        assert req.url == "/users/42"
        assert req.query["x"] == "1"
        assert req.host == "example.com"
        assert req.user_agent == "pytest"
        assert req.cookies == {"a": "1", "b": "2"}
        assert req.params == {}
        assert req.body is None

    def test_missing_headers_default_to_empty(self) -> None:
        req = Request.from_scope(_scope())
        assert req.host == ""
        assert req.user_agent == ""
        assert req.content_type is None
        assert req.cookies == {}

    def test_url_is_raw_path(self) -> None:
        scope = _scope(path="/files/a/b")
        scope["raw_path"] = b"/files/a%2Fb"
        assert Request.from_scope(scope).url == "/files/a%2Fb"

    def test_url_falls_back_to_path(self) -> None:
        scope = _scope(path="/plain")
        scope["raw_path"] = None
        assert Request.from_scope(scope).url == "/plain"

    def test_frozen(self) -> None:
        req = Request.from_scope(_scope())
        with pytest.raises(dataclasses.FrozenInstanceError):
            req.url = "/other"  # type: ignore[misc]


class TestRequestFromAsgi:
    async def test_get_skips_body(self) -> None:
        req = await Request.from_asgi(_scope(), _never_called, max_body_size=10)
        assert req.body is None
        assert req.raw_body is None

    async def test_post_form(self) -> None:
        scope = _scope(
            "POST",
            "/login",
            headers=[(b"content-type", b"application/x-www-form-urlencoded")],
        )
        req = await Request.from_asgi(scope, _receive_once(b"user=ann&pw=x"), max_body_size=100)
        assert req.body == {"user": "ann", "pw": "x"}
        assert req.raw_body == "user=ann&pw=x"

    async def test_post_json(self) -> None:
        scope = _scope("POST", "/api", headers=[(b"content-type", b"application/json")])
        req = await Request.from_asgi(scope, _receive_once(b'{"a": 1}'), max_body_size=100)
        assert req.body == {"a": 1}

    async def test_post_other_is_raw_text(self) -> None:
        scope = _scope("POST", "/notes", headers=[(b"content-type", b"text/plain")])
        req = await Request.from_asgi(scope, _receive_once(b"hi there"), max_body_size=100)
        assert req.body == "hi there"


class TestViews:
    def _request(self) -> Request:
        req = Request.from_scope(
            _scope(
                path="/users/42",
                query=b"x=1",
                headers=[(b"host", b"h"), (b"cookie", b"s=abc")],
            ),
            body={"k": "v"},
            raw_body="k=v",
        )
        req.params["id"] = "42"
        return req

    def test_get_view(self) -> None:
        view = GetRequest.of(self._request())
        assert view.url == "/users/42"
        assert view.params["id"] == "42"
        assert view.query["x"] == "1"
        assert view.cookies["s"] == "abc"
        assert view.host == "h"
        assert view.data is None
        assert not hasattr(view, "body")

    def test_post_view(self) -> None:
        view = PostRequest.of(self._request(), data="validated")
        assert view.body == {"k": "v"}
        assert view.raw_body == "k=v"
        assert view.data == "validated"
        assert not hasattr(view, "query")

    def test_views_are_read_only(self) -> None:
        view = GetRequest.of(self._request())
        with pytest.raises(TypeError):
            view.params["id"] = "7"  # type: ignore[index]
        with pytest.raises(TypeError):
            view.cookies["s"] = "x"  # type: ignore[index]
        with pytest.raises(dataclasses.FrozenInstanceError):
            view.url = "/x"  # type: ignore[misc]
