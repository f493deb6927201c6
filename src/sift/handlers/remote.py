"""Remote proxying via httpx.

The incoming path, still percent-encoded, and the query string are
resolved against a base URL and fetched; the upstream status, headers,
and raw body come back verbatim. One attempt per request, no retries.
"""

import logging
from typing import Any

import httpx

from sift._internal.types import Handler, PathParams
from sift.errors import BadGateway
from sift.http.request import Request
from sift.http.response import Response

logger = logging.getLogger("sift.handlers")

# Request headers worth passing upstream; the rest describe this hop.
_FORWARDED_REQUEST_HEADERS = ("accept", "accept-language", "content-type", "user-agent")

# Response framing the server recomputes for the body it actually sends.
_HOP_BY_HOP = frozenset({"connection", "content-length", "keep-alive", "transfer-encoding"})


def client_options(
    transport: httpx.AsyncBaseTransport | None,
    timeout: float | None,
) -> dict[str, Any]:
    """Keyword arguments for ``httpx.AsyncClient``; httpx defaults otherwise."""
    options: dict[str, Any] = {}
    if transport is not None:
        options["transport"] = transport
    if timeout is not None:
        options["timeout"] = timeout
    return options


def remote_url(base_url: str, target: str) -> httpx.URL:
    """Resolve *target* (path, optional query) against *base_url*.

    An absolute path replaces the base URL's path, so
    ``remote_url("https://api.example.com/v1", "/todos/1")`` is
    ``https://api.example.com/todos/1``.
    """
    return httpx.URL(base_url).join(target)


def serve_remote(
    base_url: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | None = None,
) -> Handler:
    """Proxy requests to *base_url*.

    Args:
        base_url: Origin (and optional path) to resolve request paths against.
        transport: Custom httpx transport (tests use ``httpx.MockTransport``).
        timeout: Overrides the httpx default timeout, in seconds.
    """
    options = client_options(transport, timeout)

    async def remote_handler(request: Request, params: PathParams) -> Response | Exception:
        url = remote_url(base_url, request.url)
        headers = {
            name: value
            for name in _FORWARDED_REQUEST_HEADERS
            if (value := request.headers.get(name)) is not None
        }
        body = await request.body()
        try:
            async with (
                httpx.AsyncClient(**options) as client,
                client.stream(
                    request.method, url, headers=headers, content=body or None
                ) as upstream,
            ):
                content = b"".join([chunk async for chunk in upstream.aiter_raw()])
        except httpx.HTTPError as exc:
            logger.warning("Upstream request to %s failed: %s", url, exc)
            return BadGateway(f"Upstream request failed: {exc}")

        content_type = upstream.headers.get("content-type", "application/octet-stream")
        # A HEAD reply has no body to measure, so its length is kept.
        dropped = _HOP_BY_HOP - {"content-length"} if request.method == "HEAD" else _HOP_BY_HOP
        passthrough = tuple(
            (name, value)
            for name, value in upstream.headers.multi_items()
            if name.lower() not in dropped and name.lower() != "content-type"
        )
        return Response(
            body=content,
            status=upstream.status_code,
            content_type=content_type,
            headers=passthrough,
            reason=upstream.reason_phrase,
        )

    return remote_handler
