"""Route frozen dataclass."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wren.routing.template import RouteTemplate, compile_template

SUPPORTED_METHODS: frozenset[str] = frozenset({"GET", "POST"})


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created during app setup, stored in the router for the life of the
    process. ``endpoint`` is any async callable with the
    ``(request, send) -> "handled" | "next"`` shape (normally an
    ``Endpoint``).
    """

    method: str
    template: RouteTemplate
    endpoint: Callable[..., Any]

    @property
    def path(self) -> str:
        """The template string as registered."""
        return self.template.template

    @classmethod
    def create(cls, method: str, template: str, endpoint: Callable[..., Any]) -> Route:
        """Compile *template* and build a Route for *method*."""
        return cls(method=method.upper(), template=compile_template(template), endpoint=endpoint)
