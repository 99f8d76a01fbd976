"""Cookies in both directions.

``parse_cookies`` reads the request's ``Cookie`` header; ``SetCookie``
builds the ``Set-Cookie`` values a ``Redirect`` carries.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

# name=value, whitespace around either side trimmed; value may contain "="
_COOKIE_PAIR = re.compile(r"^\s*([^=]+?)\s*=\s*(.*?)\s*$")


def parse_cookies(header: str) -> dict[str, str]:
    """Map cookie names to values from a ``Cookie`` header.

    Segments that are not ``name=value`` are ignored; a repeated name
    keeps its last value.
    """
    found = (_COOKIE_PAIR.match(segment) for segment in header.split(";")) if header else ()
    return {m.group(1): m.group(2) for m in found if m is not None}


@dataclass(frozen=True, slots=True)
class SetCookie:
    """One cookie to set on the client.

    ``max_age=0`` expires the cookie immediately. Attributes left at
    ``None`` / ``False`` / ``""`` are omitted from the header.
    """

    name: str
    value: str
    max_age: int | None = None
    path: str = "/"
    domain: str | None = None
    secure: bool = False
    httponly: bool = True
    samesite: str = "lax"

    def _attributes(self) -> Iterator[str]:
        if self.max_age is not None:
            yield f"Max-Age={self.max_age}"
        if self.path:
            yield f"Path={self.path}"
        if self.domain:
            yield f"Domain={self.domain}"
        if self.secure:
            yield "Secure"
        if self.httponly:
            yield "HttpOnly"
        if self.samesite:
            yield f"SameSite={self.samesite}"

    def to_header_value(self) -> str:
        return "; ".join((f"{self.name}={self.value}", *self._attributes()))
