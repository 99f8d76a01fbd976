"""Calling user handlers that may or may not be coroutines.

Handlers are registered as plain ``def`` or ``async def`` functions; the
endpoint adapter calls them through ``invoke`` and never checks which.
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *handler*, awaiting its result when it returned an awaitable.

    Both of these are valid GET handlers::

        def profile(req):
            return Text(f"user {req.params['id']}")

        async def profile(req):
            return Html(render(await load_user(req.params["id"])))
    """
    outcome = handler(*args, **kwargs)
    if inspect.isawaitable(outcome):
        return await outcome
    return outcome
