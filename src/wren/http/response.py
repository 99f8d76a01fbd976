"""Endpoint results and the wire-level Response.

Handlers return one of five small, frozen result types (``Html``, ``Text``,
``Redirect``, ``Status``, ``Skip``). The endpoint adapter turns that value
into a ``Response``, which the sender writes to ASGI.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

from wren.http.cookies import SetCookie

# -- Endpoint results --


@dataclass(frozen=True, slots=True)
class Html:
    """Render an HTML document (200, ``text/html``, doctype prepended)."""

    html: str


@dataclass(frozen=True, slots=True)
class Text:
    """Render plain text (200, ``text/plain``)."""

    text: str


@dataclass(frozen=True, slots=True)
class Redirect:
    """302 to *to*, optionally setting cookies.

    Cookies may be raw ``Set-Cookie`` values or ``SetCookie`` instances::

        Redirect("/login", set_cookies=["session=; Max-Age=0"])
        Redirect("/", set_cookies=[SetCookie("session", token)])
    """

    to: str
    set_cookies: Sequence[str | SetCookie] = ()

    def cookie_headers(self) -> list[str]:
        return [
            cookie.to_header_value() if isinstance(cookie, SetCookie) else cookie
            for cookie in self.set_cookies
        ]


@dataclass(frozen=True, slots=True)
class Status:
    """A bare status with an empty body. No code (or 0) means 204."""

    code: int | None = None


@dataclass(frozen=True, slots=True)
class Skip:
    """Decline the request; dispatch moves on to the next matching route."""


type EndpointResponse = Html | Text | Redirect | Status | Skip


# -- Wire response --


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    ``content_type`` is ``None`` for responses that carry no Content-Type
    header at all (bare statuses, redirects). ``headers`` is an ordered
    tuple so a name such as ``Set-Cookie`` can repeat.
    """

    body: str | bytes = b""
    status: int = 200
    content_type: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers.

        A ``Content-Type`` entry replaces ``content_type`` instead of
        being sent twice.
        """
        result = self
        for name, value in headers.items():
            if name.lower() == "content-type":
                result = replace(result, content_type=value)
            else:
                result = result.with_header(name, value)
        return result

    # -- Accessors --

    def get_header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or ``None``."""
        values = self.get_headers(name)
        return values[0] if values else None

    def get_headers(self, name: str) -> list[str]:
        """Every value of header *name* (case-insensitive)."""
        key = name.lower()
        if key == "content-type":
            return [self.content_type] if self.content_type is not None else []
        return [value for header, value in self.headers if header.lower() == key]

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body
