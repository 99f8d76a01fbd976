"""Server runner.

Starts a pounce ASGI server with the live wren App object.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wren.app import App


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    workers: int = 1,
    reload: bool = False,
    log_level: str = "info",
    app_path: str | None = None,
) -> None:
    """Serve *app* with pounce until interrupted.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but wren has a live ``App`` object. We use ``pounce.Server``
    directly with the ASGI callable.

    Args:
        app: ASGI callable (wren App instance).
        host: Bind host address.
        port: Bind port number.
        workers: Worker count.
        reload: Enable auto-reload on file changes.
        log_level: Level for the ``wren`` loggers (debug, info, warning, ...).
        app_path: Optional ``"module:attribute"`` import string.  When
            provided, pounce reimports the app on each reload cycle.
    """
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("wren").setLevel(log_level.upper())

    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        reload=reload,
    )
    server = Server(config, app, app_path=app_path)
    server.run()
