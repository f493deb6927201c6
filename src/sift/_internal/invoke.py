"""Invoke helpers: call sync or async handlers uniformly.

Sift handlers can be ``def`` or ``async def``. Any code that calls a
user-provided handler goes through ``invoke()`` so the sync/async check
lives in exactly one place.
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        def hello(request, params):
            return Response("hi")

        async def user(request, params):
            return serve_json(await load_user(params["id"]))
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
