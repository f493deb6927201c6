"""Directory listings.

Walks a directory recursively, collects every file (directories
themselves are not listed) and renders ``dirlisting.html``. Entries
come out in walk order and are rebuilt on every request.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

import anyio
from kida import Environment

from sift.http.request import Request
from sift.http.response import Response
from sift.templating.integration import render_template

LISTING_TEMPLATE = "dirlisting.html"

_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB")


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One file row of a listing page."""

    path: str
    name: str
    size: str
    date_modified: str


def format_size(num_bytes: int) -> str:
    """Human-readable byte count using decimal units.

    ``format_size(0) == "0 B"``, ``format_size(1500) == "1.5 kB"``.
    """
    if num_bytes < 1000:
        return f"{num_bytes} B"
    value = float(num_bytes)
    for unit in _UNITS:
        value /= 1000
        if value < 1000 or unit == _UNITS[-1]:
            return f"{value:.1f} {unit}"
    raise AssertionError("unreachable")


def format_mtime(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")


async def list_directory(directory: str | Path, url_path: str) -> list[DirectoryEntry]:
    """Collect every file below *directory*, linked relative to *url_path*."""
    root = anyio.Path(directory)
    prefix = url_path.rstrip("/")
    entries: list[DirectoryEntry] = []
    async for item in root.rglob("*"):
        if not await item.is_file():
            continue
        stat = await item.stat()
        relative = item.relative_to(root).as_posix()
        entries.append(
            DirectoryEntry(
                path=f"{prefix}/{quote(relative)}",
                name=relative,
                size=format_size(stat.st_size),
                date_modified=format_mtime(stat.st_mtime),
            )
        )
    return entries


async def render_listing(env: Environment, request: Request, directory: str | Path) -> Response:
    """Render the listing page for *directory* as served at ``request.path``."""
    files = await list_directory(directory, request.path)
    html = render_template(env, LISTING_TEMPLATE, {"directory": request.path, "files": files})
    return Response(body=html, content_type="text/html; charset=utf-8")
