"""Wren exception hierarchy.

Shared across the router, endpoints, and the dispatch loop so every module
raises and catches the same types.
"""

from collections.abc import Mapping

DEFAULT_ERROR_MESSAGE = "Internal server error"
DEFAULT_ERROR_HEADERS: Mapping[str, str] = {"Content-Type": "text/plain"}


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when routes or app configuration are invalid.

    Typically raised during registration, before the app serves requests.
    """


class EndpointError(WrenError):
    """An error a handler raises (or returns) to answer with a given status.

    The code, message, and headers are sent to the client verbatim.
    Missing pieces fall back to a generic 500 ``text/plain`` answer::

        raise EndpointError(403, "Forbidden")
        return EndpointError(409, "Already exists", {"Content-Type": "text/plain"})
    """

    def __init__(
        self,
        code: int = 500,
        message: str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message or "")
        self.code = code or 500
        self.message = DEFAULT_ERROR_MESSAGE if message is None else message
        self.headers: dict[str, str] = dict(headers) if headers else dict(DEFAULT_ERROR_HEADERS)

    def __repr__(self) -> str:
        return f"EndpointError({self.code}, {self.message!r})"


class SchemaError(EndpointError):
    """400 — request data did not satisfy the endpoint's declared schema."""

    def __init__(self, field: str, detail: str) -> None:
        super().__init__(400, f"Invalid field {field!r}: {detail}")
        self.field = field
        self.detail = detail


class BodyTooLarge(WrenError):  # noqa: N818
    """The request body exceeded the configured size limit.

    Not an HTTP error the client gets to read: the dispatch loop answers
    500 and closes the connection.
    """

    def __init__(self, limit: int) -> None:
        super().__init__(f"Request body exceeds {limit} bytes")
        self.limit = limit


class BodyTimeout(WrenError):  # noqa: N818
    """The request body was not received within the request timeout."""


class ClientDisconnect(WrenError):  # noqa: N818
    """The client went away before the request body was complete.

    Nothing is sent back and no handler runs for the partial request.
    """
