"""Markdown layer error hierarchy."""

from sift.errors import SiftError


class MarkdownError(SiftError):
    """Base for all sift.markdown errors."""


class MarkdownNotInstalledError(MarkdownError):
    """Raised when patitas is not installed."""
