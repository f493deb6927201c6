"""Kida environment setup.

The environment looks in the user's ``template_dir`` first, then in the
templates packaged with sift, so dropping a ``dirlisting.html`` into
``template_dir`` replaces the built-in listing page.
"""

from pathlib import Path
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader


def create_environment(template_dir: str | Path | None = None) -> Environment:
    """Create a kida Environment for sift's built-in pages."""
    loaders = []
    if template_dir is not None:
        loaders.append(FileSystemLoader(str(template_dir)))
    loaders.append(PackageLoader("sift.templating", "templates"))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_template(env: Environment, name: str, context: dict[str, Any]) -> str:
    """Render template *name* to a string."""
    return env.get_template(name).render(context)
