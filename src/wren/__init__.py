"""Wren — a small HTTP router and static file server for ASGI.

Routes are ``/:param`` templates tried in registration order; handlers
return one of a handful of result values; files under ``./public`` are
served before any route is consulted.

Basic usage::

    from wren import App, Html, Text

    app = App()

    @app.get("/users/:id")
    def show_user(req):
        return Text(f"user {req.params['id']}")

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "Endpoint",
    "EndpointError",
    "EndpointResponse",
    "GetRequest",
    "Html",
    "PostRequest",
    "Redirect",
    "Request",
    "Response",
    "SetCookie",
    "Skip",
    "Status",
    "Text",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "App":
        from wren.app import App

        return App

    if name == "AppConfig":
        from wren.config import AppConfig

        return AppConfig

    if name == "Endpoint":
        from wren.endpoint import Endpoint

        return Endpoint

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name in ("GetRequest", "PostRequest"):
        from wren.http import views as _views

        return getattr(_views, name)

    if name in ("EndpointResponse", "Html", "Redirect", "Response", "Skip", "Status", "Text"):
        from wren.http import response as _resp

        return getattr(_resp, name)

    if name == "SetCookie":
        from wren.http.cookies import SetCookie

        return SetCookie

    if name in ("ConfigurationError", "EndpointError", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
