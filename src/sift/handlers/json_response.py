"""JSON responses and the error body shape.

Bodies are compact JSON (no spaces after separators) followed by a
newline::

    serve_json({"message": "hello"})   ->  {"message":"hello"}\\n
    json_error(404)                    ->  {"error":"Not Found"}\\n
"""

import json as json_module
from collections.abc import Mapping
from typing import Any

from sift.http.response import Response, status_text

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def serve_json(
    value: Any,
    *,
    status: int = 200,
    headers: Mapping[str, str] | None = None,
    reason: str | None = None,
) -> Response:
    """Serialize *value* to a JSON response.

    ``Content-Type`` is ``application/json; charset=utf-8`` unless
    *headers* already carries one. The reason phrase defaults to the
    standard text for *status*.

    Raises ``TypeError`` if *value* is not JSON-serializable.
    """
    content_type = JSON_CONTENT_TYPE
    extra: list[tuple[str, str]] = []
    for name, header_value in (headers or {}).items():
        if name.lower() == "content-type":
            content_type = header_value
        else:
            extra.append((name, header_value))

    body = json_module.dumps(value, separators=(",", ":"), ensure_ascii=False) + "\n"
    return Response(
        body=body,
        status=status,
        content_type=content_type,
        headers=tuple(extra),
        reason=reason or status_text(status),
    )


def json_error(status: int, message: str | None = None) -> Response:
    """Build the ``{"error": ...}`` response used for every failure."""
    return serve_json({"error": message or status_text(status)}, status=status)
