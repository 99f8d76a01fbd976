"""Tests for wren.endpoint — running handlers and mapping their results."""

from dataclasses import dataclass

import anyio

from wren.endpoint import Endpoint
from wren.errors import EndpointError
from wren.http.request import Request
from wren.http.response import Skip, Status, Text


def _request(method: str = "GET", *, query: bytes = b"", body=None) -> Request:
    return Request.from_scope(
        {"method": method, "path": "/things/1", "query_string": query, "headers": []},
        body=body,
    )


class _Recorder:
    """Collects ASGI messages sent by an endpoint."""

    def __init__(self) -> None:
        self.messages: list[dict] = []

    async def __call__(self, message: dict) -> None:
        self.messages.append(message)

    @property
    def status(self) -> int | None:
        for message in self.messages:
            if message["type"] == "http.response.start":
                return message["status"]
        return None

    @property
    def body(self) -> bytes:
        return b"".join(m.get("body", b"") for m in self.messages if m["type"] == "http.response.body")


class TestEndpointDispatch:
    async def test_sync_get_handler(self) -> None:
        send = _Recorder()
        ep = Endpoint(get=lambda req: Text("ok"))
        assert await ep(_request(), send) == "handled"
        assert send.status == 200
        assert send.body == b"ok"

    async def test_async_post_handler(self) -> None:
        async def create(req):
            return Text(str(req.body["n"]))

        send = _Recorder()
        ep = Endpoint(post=create)
        assert await ep(_request("POST", body={"n": 5}), send) == "handled"
        assert send.body == b"5"

    async def test_missing_handler_is_400(self) -> None:
        send = _Recorder()
        ep = Endpoint(post=lambda req: Text("never"))
        assert await ep(_request("GET"), send) == "handled"
        assert send.status == 400

    async def test_skip_sends_nothing(self) -> None:
        send = _Recorder()
        ep = Endpoint(get=lambda req: Skip())
        assert await ep(_request(), send) == "next"
        assert send.messages == []

    async def test_returned_error(self) -> None:
        send = _Recorder()
        ep = Endpoint(get=lambda req: EndpointError(404, "No such thing"))
        await ep(_request(), send)
        assert send.status == 404
        assert send.body == b"No such thing"

    async def test_raised_error(self) -> None:
        def forbid(req):
            raise EndpointError(403, "Forbidden")

        send = _Recorder()
        await Endpoint(get=forbid)(_request(), send)
        assert send.status == 403
        assert send.body == b"Forbidden"

    async def test_unexpected_exception_is_generic_500(self, caplog) -> None:
        def boom(req):
            raise ValueError("secret detail")

        send = _Recorder()
        assert await Endpoint(get=boom)(_request(), send) == "handled"
        assert send.status == 500
        assert send.body == b"Internal server error"
        assert b"secret" not in send.body
        assert any(r.exc_info for r in caplog.records)

    async def test_timeout_is_500(self) -> None:
        async def slow(req):
            await anyio.sleep(1)
            return Status(200)

        send = _Recorder()
        await Endpoint(get=slow, timeout=0.01)(_request(), send)
        assert send.status == 500

    def test_name(self) -> None:
        def show():
            pass

        def update():
            pass

        assert Endpoint(get=show, post=update).name == "show/update"
        assert Endpoint(post=update).name == "update"
        assert Endpoint().name == "-"


@dataclass(frozen=True)
class Search:
    q: str
    page: int = 1


@dataclass(frozen=True)
class Signup:
    email: str
    age: int
    newsletter: bool = False


class TestSchemas:
    async def test_query_schema(self) -> None:
        seen = {}

        def search(req):
            seen["data"] = req.data
            return Text("ok")

        send = _Recorder()
        await Endpoint(get=search, query=Search)(_request(query=b"q=wren&page=3"), send)
        assert send.status == 200
        assert seen["data"] == Search(q="wren", page=3)

    async def test_body_schema(self) -> None:
        seen = {}

        def signup(req):
            seen["data"] = req.data
            return Status(201)

        send = _Recorder()
        body = {"email": "a@b.c", "age": "30", "newsletter": "on"}
        await Endpoint(post=signup, body=Signup)(_request("POST", body=body), send)
        assert send.status == 201
        assert seen["data"] == Signup(email="a@b.c", age=30, newsletter=True)

    async def test_schema_failure_is_400(self) -> None:
        send = _Recorder()
        ep = Endpoint(post=lambda req: Text("never"), body=Signup)
        await ep(_request("POST", body={"email": "a@b.c", "age": "old"}), send)
        assert send.status == 400
        assert b"age" in send.body

    async def test_text_body_rejected_by_schema(self) -> None:
        send = _Recorder()
        ep = Endpoint(post=lambda req: Text("never"), body=Signup)
        await ep(_request("POST", body="raw text"), send)
        assert send.status == 400
