"""Endpoint adapter — runs a GET/POST handler pair for one route.

An ``Endpoint`` picks the handler for the request method, hands it a
read-only view of the request, and turns whatever comes back into one
wire response. Handler failures stop here: they become error responses
and never reach the dispatch loop.

Handlers return an endpoint result (``Html``, ``Text``, ``Redirect``,
``Status``, ``Skip``) or an ``EndpointError``; raising an
``EndpointError`` works the same as returning it::

    async def show(req: GetRequest) -> EndpointResponse | EndpointError:
        user = await users.get(req.params["id"])
        if user is None:
            return EndpointError(404, "No such user")
        return Html(render_user(user))
"""

from collections.abc import Callable
from typing import Any

import anyio

from wren._internal.asgi import Send
from wren._internal.invoke import invoke
from wren._internal.types import Handler, Outcome
from wren.errors import EndpointError
from wren.extraction import extract_dataclass
from wren.http.request import Request
from wren.http.response import Html, Redirect, Response, Skip, Status, Text
from wren.http.views import GetRequest, PostRequest
from wren.server.errors import endpoint_error_response, handle_internal_error
from wren.server.sender import send_response

DOCTYPE = "<!DOCTYPE html>\n"


def render_outcome(outcome: Any) -> Response | None:
    """Map a handler outcome to the wire response. ``None`` means skip.

    Pure: no I/O, no logging. Anything unrecognized (including ``None``
    and ``Status()``) becomes an empty 204.
    """
    match outcome:
        case Skip():
            return None
        case EndpointError():
            return endpoint_error_response(outcome)
        case Status(code=code) if code:
            return Response(status=code)
        case Html(html=html):
            return Response(body=DOCTYPE + html, content_type="text/html")
        case Text(text=text):
            return Response(body=text, content_type="text/plain")
        case Redirect():
            response = Response(status=302).with_header("Location", outcome.to)
            for cookie in outcome.cookie_headers():
                response = response.with_header("Set-Cookie", cookie)
            return response
        case _:
            return Response(status=204)


class Endpoint:
    """A GET handler and/or a POST handler bound to one route template.

    Args:
        get: Handler called with a ``GetRequest`` for GET requests.
        post: Handler called with a ``PostRequest`` for POST requests.
        query: Optional dataclass the query string is validated into
            before *get* runs (available as ``view.data``).
        body: Optional dataclass the parsed body is validated into
            before *post* runs (available as ``view.data``).
        timeout: Seconds a handler may run before it counts as failed.
    """

    __slots__ = ("body_schema", "get", "post", "query_schema", "timeout")

    def __init__(
        self,
        get: Handler | None = None,
        post: Handler | None = None,
        *,
        query: type | None = None,
        body: type | None = None,
        timeout: float | None = None,
    ) -> None:
        self.get = get
        self.post = post
        self.query_schema = query
        self.body_schema = body
        self.timeout = timeout

    @property
    def name(self) -> str:
        """Handler names for introspection, e.g. ``show_user/update_user``."""
        handlers: list[Callable[..., Any]] = [h for h in (self.get, self.post) if h is not None]
        return "/".join(getattr(h, "__name__", repr(h)) for h in handlers) or "-"

    async def __call__(self, request: Request, send: Send) -> Outcome:
        """Run the handler for *request* and send its response.

        Returns ``"next"`` (and sends nothing) when the handler skips.
        """
        try:
            outcome = await self._run(request)
        except EndpointError as exc:
            outcome = exc
        except Exception as exc:
            await send_response(handle_internal_error(exc, request.method, request.url), send)
            return "handled"

        response = render_outcome(outcome)
        if response is None:
            return "next"
        await send_response(response, send)
        return "handled"

    async def _run(self, request: Request) -> Any:
        if request.method == "POST" and self.post is not None:
            data = extract_dataclass(self.body_schema, request.body) if self.body_schema else None
            handler: Handler = self.post
            view: GetRequest | PostRequest = PostRequest.of(request, data)
        elif request.method == "GET" and self.get is not None:
            data = extract_dataclass(self.query_schema, request.query) if self.query_schema else None
            handler = self.get
            view = GetRequest.of(request, data)
        else:
            return Status(400)

        with anyio.fail_after(self.timeout):
            return await invoke(handler, view)

    def __repr__(self) -> str:
        return f"Endpoint({self.name})"
