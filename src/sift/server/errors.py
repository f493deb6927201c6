"""Error-to-response mapping.

Every failure the dispatcher sees, raised or returned, goes through
``error_response()``. ``ERROR_STATUS`` is the single table translating
error kinds to status codes; anything not listed is a handler failure
and becomes a 500.
"""

import logging

from sift.errors import HTTPError, NotFound
from sift.handlers.json_response import json_error
from sift.http.request import Request
from sift.http.response import Response, status_text

logger = logging.getLogger("sift.server")

# Checked in order; the first matching kind wins.
ERROR_STATUS: tuple[tuple[type[BaseException], int], ...] = (
    (NotFound, 404),
    (FileNotFoundError, 404),
)

INTERNAL_SERVER_ERROR = 500


def status_for(exc: BaseException) -> int:
    """HTTP status for *exc*."""
    for kind, status in ERROR_STATUS:
        if isinstance(exc, kind):
            return status
    if isinstance(exc, HTTPError):
        return exc.status
    return INTERNAL_SERVER_ERROR


def error_message(exc: BaseException, status: int, *, expose_messages: bool) -> str:
    """Text for the ``error`` field of the response body.

    Client errors carry the error's detail. Server errors carry the
    generic status phrase unless *expose_messages* is set.
    """
    if status < 500:
        if isinstance(exc, HTTPError) and exc.detail:
            return exc.detail
        return status_text(status)
    if expose_messages:
        message = exc.detail if isinstance(exc, HTTPError) else str(exc)
        if message:
            return message
    return status_text(status) or "Internal Server Error"


def error_response(exc: BaseException, *, expose_messages: bool = False) -> Response:
    """Translate *exc* into a JSON error response."""
    status = status_for(exc)
    return json_error(status, error_message(exc, status, expose_messages=expose_messages))


def handle_returned_error(
    exc: BaseException,
    request: Request,
    *,
    expose_messages: bool = False,
) -> Response:
    """Map an error a handler returned as its result."""
    response = error_response(exc, expose_messages=expose_messages)
    if response.status >= 500:
        logger.error("%d %s %s: %s", response.status, request.method, request.path, exc)
    else:
        logger.debug("%d %s %s: %s", response.status, request.method, request.path, exc)
    return response


def handle_raised_error(
    exc: Exception,
    method: str,
    path: str,
    *,
    expose_messages: bool = False,
) -> Response:
    """Map an exception raised while serving a request."""
    response = error_response(exc, expose_messages=expose_messages)
    if response.status >= 500:
        logger.exception("Error serving request: %s %s", method, path)
    else:
        logger.debug("%d %s %s: %s", response.status, method, path, exc)
    return response
