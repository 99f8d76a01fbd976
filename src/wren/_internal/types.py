"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, Literal, TypeAlias

# Route handler, called with a GetRequest or PostRequest view
Handler: TypeAlias = Callable[..., Any]

# What an endpoint tells the dispatch loop after it ran
Outcome: TypeAlias = Literal["handled", "next"]
