"""ASGI handler — the per-request dispatch loop.

The only component that touches raw ASGI scopes directly. For each HTTP
request it:

1. answers the liveness probe without parsing anything
2. preprocesses the request (awaiting the body for POST)
3. serves a static file when one exists at the mapped path
4. scans the route list for the method in registration order, letting
   each matching endpoint either handle the request or pass ("next")
5. answers 404 when nothing handled it
"""

import logging

import anyio

from wren._internal.asgi import Receive, Scope, Send
from wren.config import AppConfig
from wren.errors import BodyTimeout, BodyTooLarge, ClientDisconnect
from wren.http.request import Request
from wren.http.response import Response
from wren.observe import RequestObserver
from wren.routing.router import Router
from wren.routing.template import bind
from wren.server.errors import (
    bad_request_response,
    connection_abort_response,
    handle_internal_error,
    not_found_response,
)
from wren.server.sender import send_response
from wren.static import StaticFiles

logger = logging.getLogger("wren.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    config: AppConfig,
    static: StaticFiles | None,
    observer: RequestObserver,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    method = scope["method"].upper()
    path = scope["path"]

    if method == "GET" and path == config.health_path:
        await send_response(Response(body=config.health_body, content_type="text/plain"), send)
        return

    status: int | None = None

    async def tracked_send(message: dict) -> None:
        nonlocal status
        if message["type"] == "http.response.start":
            status = message["status"]
        await send(message)

    token = observer.on_request_start(method, path)
    try:
        await _dispatch(
            scope,
            receive,
            tracked_send,
            router=router,
            config=config,
            static=static,
        )
    finally:
        observer.on_request_end(token, status)


async def _dispatch(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    config: AppConfig,
    static: StaticFiles | None,
) -> None:
    method = scope["method"].upper()
    path = scope["path"]
    logger.debug("%s %s", method, path)

    try:
        request = await _preprocess(scope, receive, config)
    except ClientDisconnect:
        logger.debug("%s %s: client disconnected mid-body", method, path)
        return
    except (BodyTooLarge, BodyTimeout) as exc:
        logger.warning("%s %s: %s; closing connection", method, path, exc)
        await send_response(connection_abort_response(), send)
        return
    except Exception as exc:
        await send_response(handle_internal_error(exc, method, path), send)
        return

    if static is not None:
        file_path = await static.lookup(request.url)
        if file_path is not None:
            await send_response(await static.serve(file_path), send)
            return

    if not router.supports(request.method):
        await send_response(bad_request_response(), send)
        return

    for route in router.routes_for(request.method):
        if not bind(route.template, request.url, request):
            continue
        if await route.endpoint(request, send) == "handled":
            return

    await send_response(not_found_response(), send)


async def _preprocess(scope: Scope, receive: Receive, config: AppConfig) -> Request:
    """Build the Request, bounding the body read by the request timeout."""
    try:
        with anyio.fail_after(config.request_timeout):
            return await Request.from_asgi(scope, receive, max_body_size=config.max_body_size)
    except TimeoutError:
        msg = f"Request body not received within {config.request_timeout}s"
        raise BodyTimeout(msg) from None
