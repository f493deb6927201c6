"""Sift CLI: run an app, or serve a directory.

Entry point registered as ``sift`` in ``pyproject.toml``::

    [project.scripts]
    sift = "sift.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``sift`` command."""
    parser = argparse.ArgumentParser(
        prog="sift",
        description="Sift: a small HTTP micro-framework.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- sift run ---------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve an app")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    _add_server_arguments(run_parser)
    run_parser.add_argument(
        "--reload",
        action="store_true",
        help="Single worker, reload on code changes",
    )

    # -- sift static ------------------------------------------------------
    static_parser = subparsers.add_parser(
        "static", help="Serve files and listings from a directory"
    )
    static_parser.add_argument("directory", help="Directory to serve")
    static_parser.add_argument(
        "--no-listing",
        action="store_true",
        help="Answer 404 for directories instead of rendering a listing",
    )
    static_parser.add_argument(
        "--template-dir",
        default=None,
        help="Directory containing a dirlisting.html override",
    )
    _add_server_arguments(static_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from sift.cli._run import run_app

        run_app(args)
    elif args.command == "static":
        from sift.cli._static import run_static

        run_static(args)


def _add_server_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--host", default=None, help="Bind host address")
    parser.add_argument("--port", type=int, default=None, help="Bind port number")
    parser.add_argument("--certfile", default=None, help="TLS certificate file")
    parser.add_argument("--keyfile", default=None, help="TLS private key file")
