"""``wren routes`` — list registered routes.

Prints METHOD, TEMPLATE, and handler names in match-priority order.
"""

import argparse
import sys

from wren.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a wren app."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.endpoint, "name", None) or getattr(
            route.endpoint, "__name__", str(route.endpoint)
        )
        rows.append((route.method, route.path, handler_name))

    max_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    max_path = max(8, *(len(r[1]) for r in rows))  # "TEMPLATE" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "TEMPLATE", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, handler_name in rows:
        print(fmt.format(method, path, handler_name))
