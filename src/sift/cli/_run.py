"""``sift run``: serve an App resolved from an import string."""

import argparse
import sys
from dataclasses import replace

from sift.cli._resolve import resolve_app
from sift.errors import ConfigurationError


def run_app(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it; CLI flags override app config."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from sift.server.runner import run_server

    config = replace(
        app.config,
        host=args.host or app.config.host,
        port=args.port if args.port is not None else app.config.port,
        debug=args.reload or app.config.debug,
        ssl_certfile=args.certfile or app.config.ssl_certfile,
        ssl_keyfile=args.keyfile or app.config.ssl_keyfile,
    )
    try:
        config.validate()
        app._ensure_frozen()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    run_server(
        app,
        config.host,
        config.port,
        debug=config.debug,
        workers=config.workers,
        log_level=config.log_level,
        log_format=config.log_format,
        ssl_certfile=config.ssl_certfile,
        ssl_keyfile=config.ssl_keyfile,
        app_path=args.app,
    )
