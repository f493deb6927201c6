"""``sift static``: serve a directory with files and listings."""

import argparse
import sys
from pathlib import Path

from sift.app import App
from sift.config import AppConfig
from sift.errors import ConfigurationError
from sift.handlers.static import serve_static


def build_static_app(
    directory: str | Path,
    config: AppConfig | None = None,
    *,
    listing: bool = True,
    template_dir: str | Path | None = None,
) -> App:
    """An App serving *directory* at ``/``."""
    handler = serve_static(directory, listing=listing, template_dir=template_dir)
    return App(
        [
            ("/", handler),
            ("/:filename+", handler),
        ],
        config,
    )


def run_static(args: argparse.Namespace) -> None:
    directory = Path(args.directory)
    if not directory.is_dir():
        print(f"Error: {directory} is not a directory", file=sys.stderr)
        raise SystemExit(1)

    defaults = AppConfig()
    config = AppConfig(
        host=args.host or defaults.host,
        port=args.port if args.port is not None else defaults.port,
        ssl_certfile=args.certfile,
        ssl_keyfile=args.keyfile,
    )
    try:
        config.validate()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    app = build_static_app(
        directory,
        config,
        listing=not args.no_listing,
        template_dir=args.template_dir,
    )
    app.run()
