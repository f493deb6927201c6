"""Content negotiation: maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

from typing import Any

from sift.errors import HandlerFailure
from sift.handlers.json_response import serve_json
from sift.http.request import Request
from sift.http.response import Response
from sift.server.errors import handle_returned_error


def negotiate(value: Any, request: Request, *, expose_messages: bool = False) -> Response:
    """Convert a handler's return value to a Response.

    Dispatch order:

    1. ``Response``               -> pass through
    2. exception instance         -> error result, JSON error response
    3. ``str``                    -> 200, text/html
    4. ``bytes``                  -> 200, application/octet-stream
    5. ``dict`` / ``list``        -> 200, application/json
    6. anything else              -> handler failure (500)
    """
    match value:
        case Response():
            return value
        case BaseException():
            return handle_returned_error(value, request, expose_messages=expose_messages)
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case dict() | list():
            return serve_json(value)
        case _:
            failure = HandlerFailure(f"Handler returned unsupported type {type(value).__name__}")
            return handle_returned_error(failure, request, expose_messages=expose_messages)
