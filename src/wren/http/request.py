"""Normalized HTTP request.

Frozen metadata parsed once per request. The body is read up front (POST
only), so handlers never await the transport. ``params`` is the one
mutable piece: the route matcher fills it in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wren._internal.asgi import Receive, Scope
from wren.http.body import parse_body, read_body
from wren.http.cookies import parse_cookies
from wren.http.headers import Headers
from wren.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """A preprocessed HTTP request.

    ``url`` is the path component only, exactly as sent: percent-escapes
    are left in place (``/files/a%2Fb`` stays one segment), so route
    params arrive undecoded. The query string lives in ``query``. ``body`` is ``None`` for anything but POST, otherwise a
    form dict, a JSON value, or the raw text (see ``wren.http.body``).
    """

    method: str
    url: str
    headers: Headers
    query: QueryParams
    cookies: dict[str, str]
    body: Any = None
    raw_body: str | None = None

    # Filled in place by the route matcher
    params: dict[str, str] = field(default_factory=dict)

    @property
    def user_agent(self) -> str:
        """The User-Agent header, or ``""``."""
        return self.headers.get("user-agent", "") or ""

    @property
    def host(self) -> str:
        """The Host header, or ``""``."""
        return self.headers.get("host", "") or ""

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    # -- Factory --

    @classmethod
    def from_scope(
        cls,
        scope: Scope,
        *,
        body: Any = None,
        raw_body: str | None = None,
    ) -> Request:
        """Build a Request from an ASGI scope and an already-read body."""
        headers = Headers(tuple(scope.get("headers", ())))
        return cls(
            method=scope["method"].upper(),
            url=_raw_path(scope),
            headers=headers,
            query=QueryParams(scope.get("query_string", b"")),
            cookies=parse_cookies(headers.get("cookie", "") or ""),
            body=body,
            raw_body=raw_body,
        )

    @classmethod
    async def from_asgi(cls, scope: Scope, receive: Receive, *, max_body_size: int) -> Request:
        """Preprocess an ASGI request, awaiting the body for POST.

        Raises:
            BodyTooLarge: The body passed *max_body_size* bytes.
            json.JSONDecodeError: A JSON body could not be parsed.
        """
        request = cls.from_scope(scope)
        if request.method != "POST":
            return request

        raw = (await read_body(receive, max_body_size)).decode("utf-8", errors="replace")
        return cls(
            method=request.method,
            url=request.url,
            headers=request.headers,
            query=request.query,
            cookies=request.cookies,
            body=parse_body(raw, request.content_type),
            raw_body=raw,
        )


def _raw_path(scope: Scope) -> str:
    """The undecoded request path; servers without ``raw_path`` get ``path``."""
    raw = scope.get("raw_path")
    if raw:
        return raw.decode("latin-1")
    return scope.get("path") or "/"
