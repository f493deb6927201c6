"""Markdown to HTML via patitas.

Used by ``serve_markdown``; also usable directly::

    from sift.markdown import MarkdownRenderer

    html = MarkdownRenderer().render("# Hello")

Requires ``patitas``::

    pip install sift-http[markdown]
"""

from sift.markdown.errors import MarkdownError, MarkdownNotInstalledError
from sift.markdown.renderer import MarkdownRenderer

__all__ = [
    "MarkdownError",
    "MarkdownNotInstalledError",
    "MarkdownRenderer",
]
