"""Markdown rendered as HTML.

The source is a local file or a remote document; either way it is run
through patitas and returned as ``text/html``.
"""

import logging
from pathlib import Path

import httpx

from sift._internal.types import Handler, PathParams
from sift.errors import BadGateway, HandlerFailure, HTTPError, NotFound
from sift.handlers._files import join_filename, resolve_within
from sift.handlers.remote import client_options, remote_url
from sift.http.request import Request
from sift.http.response import Response
from sift.markdown.renderer import MarkdownRenderer

logger = logging.getLogger("sift.handlers")


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def serve_markdown(
    source: str | Path,
    base_url: str | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | None = None,
) -> Handler:
    """Render a markdown document as HTML.

    Args:
        source: Local file or directory, or an ``http(s)://`` URL. The
            route's ``filename`` parameter, when present, is appended.
        base_url: Resolve *source* against this remote origin.
        transport: Custom httpx transport for remote sources.
        timeout: Overrides the httpx default timeout, in seconds.
    """
    renderer = MarkdownRenderer()
    options = client_options(transport, timeout)

    async def fetch_remote(url: httpx.URL) -> str | HTTPError:
        try:
            async with httpx.AsyncClient(**options) as client:
                upstream = await client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("Fetching %s failed: %s", url, exc)
            return BadGateway(f"Fetching markdown failed: {exc}")
        if not upstream.is_success:
            return HTTPError(status=upstream.status_code, detail=upstream.reason_phrase)
        return upstream.text

    async def read_local(filename: str | None) -> str | HTTPError:
        target = await resolve_within(source, filename)
        if target is None:
            return NotFound()
        try:
            return await target.read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError):
            return NotFound()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", target, exc)
            return HandlerFailure(f"Could not read {target.name}")

    async def markdown_handler(request: Request, params: PathParams) -> Response | Exception:
        filename = params.get("filename")
        location = join_filename(str(source), filename)
        if base_url:
            text = await fetch_remote(remote_url(base_url, location))
        elif is_remote(location):
            text = await fetch_remote(httpx.URL(location))
        else:
            text = await read_local(filename)
        if isinstance(text, HTTPError):
            return text
        return Response(body=renderer.render(text), content_type="text/html; charset=utf-8")

    return markdown_handler
