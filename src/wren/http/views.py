"""Read-only request views handed to handlers.

A GET handler sees the query string but no body; a POST handler sees the
body but no query string. Both share the request metadata.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from wren.http.headers import Headers
from wren.http.query import QueryParams
from wren.http.request import Request


@dataclass(frozen=True, slots=True)
class _BaseView:
    url: str
    user_agent: str
    host: str
    params: Mapping[str, str]
    cookies: Mapping[str, str]
    headers: Headers


@dataclass(frozen=True, slots=True)
class GetRequest(_BaseView):
    """What a GET handler receives.

    ``data`` holds the validated query schema instance when the endpoint
    declares one, else ``None``.
    """

    query: QueryParams
    data: Any = None

    @classmethod
    def of(cls, request: Request, data: Any = None) -> GetRequest:
        return cls(
            url=request.url,
            user_agent=request.user_agent,
            host=request.host,
            params=MappingProxyType(dict(request.params)),
            cookies=MappingProxyType(request.cookies),
            headers=request.headers,
            query=request.query,
            data=data,
        )


@dataclass(frozen=True, slots=True)
class PostRequest(_BaseView):
    """What a POST handler receives.

    ``body`` is untrusted: a form dict, a JSON value, or the raw text.
    ``data`` holds the validated body schema instance when declared.
    """

    body: Any
    raw_body: str | None
    data: Any = None

    @classmethod
    def of(cls, request: Request, data: Any = None) -> PostRequest:
        return cls(
            url=request.url,
            user_agent=request.user_agent,
            host=request.host,
            params=MappingProxyType(dict(request.params)),
            cookies=MappingProxyType(request.cookies),
            headers=request.headers,
            body=request.body,
            raw_body=request.raw_body,
            data=data,
        )
