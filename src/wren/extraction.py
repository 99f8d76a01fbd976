"""Typed extraction of query parameters and form/JSON body data.

Populates frozen dataclass instances from request data, converting string
values to the annotated field types. Endpoints declare a schema with
``query=`` (GET) or ``body=`` (POST); the instance is built before the
handler runs and exposed as ``view.data``.

Supported field types: ``str``, ``int``, ``float``, ``bool``, and their
``X | None`` forms. Missing keys use the dataclass field default; a
missing key without a default, or a value that fails to convert, raises
``SchemaError`` (answered with 400).
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping
from typing import Any

from wren.errors import SchemaError

_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off", "")


def is_extractable_dataclass(annotation: Any) -> bool:
    """Return True if *annotation* is a dataclass type (not an instance)."""
    return isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


def extract_dataclass[T](cls: type[T], data: Any) -> T:
    """Create a dataclass instance from a mapping (query params, form, JSON).

    Args:
        cls: A dataclass type to instantiate.
        data: A mapping of string keys to values. Anything that is not a
            mapping (a raw text body, a JSON list) is rejected.

    Returns:
        A new instance of *cls* populated from *data*.

    Raises:
        SchemaError: A required field is missing or a value has the wrong
            shape.
    """
    if not isinstance(data, Mapping):
        raise SchemaError("body", f"expected an object, got {type(data).__name__}")

    hints = typing.get_type_hints(cls)
    kwargs: dict[str, Any] = {}

    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        if f.name not in data:
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise SchemaError(f.name, "field is required")
            continue
        kwargs[f.name] = _convert(f.name, data[f.name], hints.get(f.name, Any))

    return cls(**kwargs)


def _convert(name: str, value: Any, target_type: Any) -> Any:
    """Convert *value* to *target_type* or raise ``SchemaError``."""
    optional_of = _unwrap_optional(target_type)
    if optional_of is not None:
        if value is None:
            return None
        target_type = optional_of

    if target_type is str:
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise SchemaError(name, "expected a string")

    if target_type is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in _TRUE:
            return True
        if isinstance(value, str) and value.lower() in _FALSE:
            return False
        raise SchemaError(name, "expected a boolean")

    if target_type is int:
        if isinstance(value, bool):
            raise SchemaError(name, "expected an integer")
        try:
            return int(value)
        except (ValueError, TypeError):
            raise SchemaError(name, "expected an integer") from None

    if target_type is float:
        if isinstance(value, bool):
            raise SchemaError(name, "expected a number")
        try:
            return float(value)
        except (ValueError, TypeError):
            raise SchemaError(name, "expected a number") from None

    # Unknown type: raw value passes through
    return value


def _unwrap_optional(annotation: Any) -> Any:
    """Return ``X`` for ``X | None`` / ``Optional[X]``, else ``None``."""
    origin = typing.get_origin(annotation)
    if origin is not typing.Union and origin is not types.UnionType:
        return None
    args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
    if len(args) == 1:
        return args[0]
    return None
