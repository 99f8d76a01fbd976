"""Route templates — ``/users/:id`` style path patterns.

A template is literal text with zero or more ``/:name`` segments
(name = letters and underscores). Each parameter captures one whole
path segment. Templates without parameters match by string equality.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wren.errors import ConfigurationError

if TYPE_CHECKING:
    from wren.http.request import Request

# "/:name"; the leading slash belongs to the placeholder
PARAM_PATTERN = re.compile(r"/:([A-Za-z_]+)")
SEGMENT_CAPTURE = "/([^/]+)"


def param_names(template: str) -> tuple[str, ...]:
    """Return parameter names in declaration order.

    Examples::

        "/users"                 -> ()
        "/users/:id"             -> ("id",)
        "/orgs/:org/repos/:repo" -> ("org", "repo")
    """
    return tuple(PARAM_PATTERN.findall(template))


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A compiled template.

    ``pattern`` is ``None`` for templates without parameters, which only
    ever match the identical path.
    """

    template: str
    names: tuple[str, ...]
    pattern: re.Pattern[str] | None

    def match(self, path: str) -> dict[str, str] | None:
        """Return the bound parameters if *path* matches, else ``None``."""
        if self.pattern is None:
            return {} if path == self.template else None
        found = self.pattern.fullmatch(path)
        if found is None:
            return None
        return dict(zip(self.names, found.groups(), strict=True))


def compile_template(template: str) -> RouteTemplate:
    """Compile a template string into a ``RouteTemplate``.

    Literal text between placeholders is escaped, so ``.`` in
    ``/files/:name.txt`` matches only a dot.

    Raises ``ConfigurationError`` for templates that don't start with
    ``/`` or declare the same parameter twice.
    """
    if not template.startswith("/"):
        msg = f"Route template {template!r} must start with '/'."
        raise ConfigurationError(msg)

    names = param_names(template)
    if not names:
        return RouteTemplate(template=template, names=(), pattern=None)

    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        msg = f"Route template {template!r} repeats parameter(s): {', '.join(duplicates)}."
        raise ConfigurationError(msg)

    parts: list[str] = []
    last = 0
    for found in PARAM_PATTERN.finditer(template):
        parts.append(re.escape(template[last : found.start()]))
        parts.append(SEGMENT_CAPTURE)
        last = found.end()
    parts.append(re.escape(template[last:]))
    return RouteTemplate(template=template, names=names, pattern=re.compile("".join(parts)))


def matches(template: str, path: str) -> tuple[bool, dict[str, str]]:
    """Match *path* against an uncompiled *template*.

    Convenience form of ``compile_template(template).match(path)``.
    """
    params = compile_template(template).match(path)
    if params is None:
        return False, {}
    return True, params


def bind(compiled: RouteTemplate, path: str, request: Request) -> bool:
    """Match and, on success, write the parameters into ``request.params``.

    Existing entries with the same name are overwritten; others are kept.
    """
    params = compiled.match(path)
    if params is None:
        return False
    request.params.update(params)
    return True
