"""Filesystem helpers shared by the static, listing, and markdown handlers."""

import mimetypes
from pathlib import Path

import anyio

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Non-text/* types that are still text and get an explicit charset
_TEXTUAL = frozenset({
    "application/javascript",
    "application/json",
    "application/xml",
    "image/svg+xml",
})


def guess_content_type(path: str | Path) -> str:
    """Content type for *path* by extension, with a charset for text types."""
    content_type, _ = mimetypes.guess_type(str(path))
    if content_type is None:
        return DEFAULT_CONTENT_TYPE
    if content_type.startswith("text/") or content_type in _TEXTUAL:
        return f"{content_type}; charset=utf-8"
    return content_type


def join_filename(base: str, filename: str | None) -> str:
    """Append *filename* to *base* with exactly one separator."""
    if not filename:
        return base
    return base + filename if base.endswith("/") else f"{base}/{filename}"


async def resolve_within(root: str | Path, filename: str | None) -> anyio.Path | None:
    """Resolve *filename* under *root*.

    Returns ``None`` when the result would escape *root* (``..``
    segments, absolute names, or symlinks pointing outside).
    """
    base = await anyio.Path(root).resolve()
    if not filename:
        return base
    target = await (base / filename.lstrip("/")).resolve()
    if not target.is_relative_to(base):
        return None
    return target
