"""Request body reading and classification.

The body is accumulated from ASGI ``http.request`` messages under a hard
size cap, then interpreted according to its ``Content-Type``.
"""

import json
from typing import Any
from urllib.parse import parse_qsl

from wren._internal.asgi import Receive
from wren.errors import BodyTooLarge, ClientDisconnect

FORM_URLENCODED = "application/x-www-form-urlencoded"
JSON = "application/json"


async def read_body(receive: Receive, limit: int) -> bytes:
    """Collect the full request body.

    Raises ``BodyTooLarge`` as soon as the accumulated size passes *limit*;
    nothing after the offending chunk is read. Raises ``ClientDisconnect``
    when the client hangs up before the last chunk arrives.
    """
    chunks: list[bytes] = []
    size = 0
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            raise ClientDisconnect
        chunk = message.get("body", b"")
        if chunk:
            size += len(chunk)
            if size > limit:
                raise BodyTooLarge(limit)
            chunks.append(chunk)
        if not message.get("more_body", False):
            break
    return b"".join(chunks)


def media_type(content_type: str | None) -> str:
    """Return the bare, lower-cased media type of a Content-Type value."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def parse_body(raw: str, content_type: str | None) -> Any:
    """Interpret a decoded body by its content type.

    - ``application/x-www-form-urlencoded``: dict, last value per key wins
    - ``application/json``: parsed JSON (``json.JSONDecodeError`` propagates)
    - anything else: the raw string

    Only the bare media type decides: parameters are dropped and case is
    ignored, so ``Application/JSON; charset=utf-8`` is parsed as JSON (and
    a malformed body under it is a fault, not raw text).
    """
    kind = media_type(content_type)
    if kind == FORM_URLENCODED:
        return dict(parse_qsl(raw, keep_blank_values=True))
    if kind == JSON:
        return json.loads(raw)
    return raw
