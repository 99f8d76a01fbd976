"""Error responses for the request pipeline.

Maps EndpointError values and unexpected failures to Response objects.
Unexpected failures never leak their message to the client.
"""

import logging

from wren.errors import DEFAULT_ERROR_MESSAGE, EndpointError
from wren.http.response import Response

logger = logging.getLogger("wren.server")


def endpoint_error_response(exc: EndpointError) -> Response:
    """Answer with the error's own code, message, and headers."""
    return Response(body=exc.message, status=exc.code, content_type=None).with_headers(exc.headers)


def internal_error_response() -> Response:
    """The generic 500 answer: ``text/plain`` ``Internal server error``."""
    return endpoint_error_response(EndpointError())


def handle_internal_error(exc: BaseException, method: str, path: str) -> Response:
    """Log an unexpected failure with its traceback and answer 500."""
    logger.error("500 %s %s", method, path, exc_info=exc)
    return internal_error_response()


def not_found_response() -> Response:
    """Routing fallback when nothing handled the request."""
    return Response(body="Not found", status=404, content_type="text/plain")


def bad_request_response() -> Response:
    """Method the route table has no list for."""
    return Response(status=400)


def connection_abort_response() -> Response:
    """Body-limit violation: 500 and ask the server to drop the connection."""
    return Response(
        body=DEFAULT_ERROR_MESSAGE,
        status=500,
        content_type=None,
        headers=(("Connection", "close"),),
    )
