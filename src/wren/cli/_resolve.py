"""Turning ``"module:attribute"`` strings into App instances.

Used by both ``wren run`` and ``wren routes``.
"""

import importlib

from wren.app import App


def resolve_app(import_string: str) -> App:
    """Import the module named before the colon and fetch the attribute after it.

    ``"myapp"`` is short for ``"myapp:app"``. When the attribute is a
    callable other than an App (an application factory), it is called
    without arguments and its result used instead.

    Raises:
        ModuleNotFoundError: The module does not import.
        AttributeError: The module has no such attribute.
        TypeError: The attribute (or factory result) is not a wren ``App``,
            or the factory itself failed.
    """
    module_name, _, attribute = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attribute or "app")

    if callable(target) and not isinstance(target, App):
        try:
            target = target()
        except Exception as exc:
            msg = f"App factory {import_string!r} failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(target, App):
        msg = f"{import_string!r} resolved to {type(target).__name__}, not a wren.App instance"
        raise TypeError(msg)

    return target
