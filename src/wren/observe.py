"""Request observability hook.

An observer is told when a request starts and which status it ended
with. The app calls it around the whole dispatch pipeline, so handlers
never time themselves.

Any object with this shape works::

    class Metrics:
        def on_request_start(self, method: str, path: str) -> object:
            return time.perf_counter()

        def on_request_end(self, token: object, status: int | None) -> None:
            histogram.observe(time.perf_counter() - token)
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger("wren.server")


class RequestObserver(Protocol):
    """Protocol for request observers.

    ``on_request_start`` returns an opaque token that is handed back to
    ``on_request_end``. ``status`` is ``None`` when no response was
    started (for example, the connection went away mid-body).
    """

    def on_request_start(self, method: str, path: str) -> Any: ...

    def on_request_end(self, token: Any, status: int | None) -> None: ...


@dataclass(frozen=True, slots=True)
class _Span:
    method: str
    path: str
    started: float


class LoggingObserver:
    """Logs one line per request: ``GET /users/42 -> 200 (1.3ms)``."""

    __slots__ = ("_logger",)

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def on_request_start(self, method: str, path: str) -> _Span:
        return _Span(method, path, time.perf_counter())

    def on_request_end(self, token: _Span, status: int | None) -> None:
        elapsed_ms = (time.perf_counter() - token.started) * 1000
        self._logger.info(
            "%s %s -> %s (%.1fms)",
            token.method,
            token.path,
            status if status is not None else "-",
            elapsed_ms,
        )


class NullObserver:
    """Observer that records nothing."""

    __slots__ = ()

    def on_request_start(self, method: str, path: str) -> None:
        return None

    def on_request_end(self, token: Any, status: int | None) -> None:
        return None
