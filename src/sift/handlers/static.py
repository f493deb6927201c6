"""Static files and directories.

``serve_static("public")`` bound to ``/public/:filename+`` serves the
file named by the ``filename`` parameter, or a listing when it names a
directory. Without a ``filename`` parameter the base path itself is
served, so ``serve_static("public/index.html")`` serves one file.

Files are read whole: no ranges, no caching headers, no streaming.
"""

import logging
from pathlib import Path

from sift._internal.types import Handler, PathParams
from sift.errors import HandlerFailure, NotFound
from sift.handlers._files import guess_content_type, resolve_within
from sift.handlers.listing import render_listing
from sift.http.request import Request
from sift.http.response import Response
from sift.templating.integration import create_environment

logger = logging.getLogger("sift.handlers")


def serve_static(
    path: str | Path,
    base_url: str | None = None,
    *,
    listing: bool = True,
    template_dir: str | Path | None = None,
) -> Handler:
    """Serve files (and directory listings) from *path*.

    When *base_url* is given the handler proxies to that remote origin
    instead; see ``serve_remote``.

    Args:
        path: File or directory to serve.
        base_url: Remote origin to proxy to instead of the filesystem.
        listing: Render a listing for directories (404 when False).
        template_dir: Directory that may override ``dirlisting.html``.
    """
    if base_url:
        from sift.handlers.remote import serve_remote

        return serve_remote(base_url)

    env = create_environment(template_dir)

    async def static_handler(request: Request, params: PathParams) -> Response | Exception:
        target = await resolve_within(path, params.get("filename"))
        if target is None:
            return NotFound()
        try:
            if await target.is_dir():
                if not listing:
                    return NotFound()
                return await render_listing(env, request, target)
            body = await target.read_bytes()
        except (FileNotFoundError, NotADirectoryError):
            return NotFound()
        except OSError as exc:
            logger.warning("Could not read %s: %s", target, exc)
            return HandlerFailure(f"Could not read {target.name}: {exc.strerror or exc}")
        return Response(body=body, content_type=guess_content_type(target))

    return static_handler


def serve_directory(path: str | Path, *, template_dir: str | Path | None = None) -> Handler:
    """Always render a listing of *path* (plus the ``filename`` parameter)."""
    env = create_environment(template_dir)

    async def directory_handler(request: Request, params: PathParams) -> Response | Exception:
        target = await resolve_within(path, params.get("filename"))
        if target is None or not await target.is_dir():
            return NotFound()
        try:
            return await render_listing(env, request, target)
        except OSError as exc:
            logger.warning("Could not list %s: %s", target, exc)
            return HandlerFailure(f"Could not list {target.name}: {exc.strerror or exc}")

    return directory_handler
