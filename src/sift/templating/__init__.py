"""Kida templating for sift's built-in pages (directory listings)."""

from sift.templating.integration import create_environment, render_template

__all__ = ["create_environment", "render_template"]
