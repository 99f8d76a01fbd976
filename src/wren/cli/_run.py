"""``wren run`` — serve an app with pounce."""

import argparse
import sys

from wren.cli._resolve import resolve_app


def run(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it until interrupted.

    CLI flags override the app's config.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app._ensure_frozen()

    from wren.server.run import run_server

    run_server(
        app,
        args.host or app.config.host,
        args.port or app.config.port,
        workers=app.config.workers,
        reload=args.reload or app.config.debug,
        log_level=app.config.log_level,
        app_path=args.app,
    )
