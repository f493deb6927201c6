"""Server startup on top of pounce.

Development mode runs a single worker with auto-reload; production mode
runs multiple workers. TLS is enabled when both a certificate and a key
are given. Connection handling, HTTP parsing, and TLS termination all
belong to pounce.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sift.app import App


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    debug: bool = False,
    workers: int = 0,
    log_level: str = "info",
    log_format: str = "text",
    ssl_certfile: str | None = None,
    ssl_keyfile: str | None = None,
    app_path: str | None = None,
) -> None:
    """Start a pounce server for *app* and block until it exits.

    Args:
        app: The sift App (an ASGI callable).
        host: Bind address.
        port: Bind port.
        debug: Single worker with auto-reload when True.
        workers: Worker count for production (0 = auto-detect).
        log_level: Log level (debug, info, warning, error, critical).
        log_format: Log format ("text" or "json").
        ssl_certfile: Path to TLS certificate file.
        ssl_keyfile: Path to TLS private key file.
        app_path: Optional ``"module:attribute"`` import string so the
            reloader can reimport the app after code changes.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1 if debug else workers,
        reload=debug,
        log_level=log_level,
        log_format=log_format,
        ssl_certfile=ssl_certfile,
        ssl_keyfile=ssl_keyfile,
    )
    if app_path is not None:
        server = Server(config, app, app_path=app_path)
    else:
        server = Server(config, app)
    server.run()
