"""Markdown to HTML through patitas.

patitas is an optional dependency; it is imported when the first
renderer is built, so ``import sift`` works without it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sift.markdown.errors import MarkdownNotInstalledError

if TYPE_CHECKING:
    from patitas import Markdown

_INSTALL_HINT = (
    "Rendering markdown needs 'patitas'. Install it with: pip install sift-http[markdown]"
)


def load_patitas() -> type[Markdown]:
    """The patitas ``Markdown`` class, or ``MarkdownNotInstalledError``."""
    try:
        from patitas import Markdown
    except ImportError:
        raise MarkdownNotInstalledError(_INSTALL_HINT) from None
    return Markdown


class MarkdownRenderer:
    """Wrapper around one configured patitas parser.

    Usage::

        renderer = MarkdownRenderer()
        renderer.render("# Title")   # '<h1 ...>Title</h1>...'

    Args:
        plugins: patitas plugins to enable; all of them when omitted.
        highlight: Highlight fenced code blocks.
    """

    __slots__ = ("_markdown",)

    def __init__(self, *, plugins: list[str] | None = None, highlight: bool = False) -> None:
        markdown_cls = load_patitas()
        self._markdown = markdown_cls(plugins=plugins or ["all"], highlight=highlight)

    def render(self, source: str) -> str:
        """HTML for *source*; empty input gives an empty string."""
        return self._markdown(source) if source else ""
