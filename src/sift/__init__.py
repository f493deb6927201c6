"""Sift: a small HTTP micro-framework.

Routes map path patterns to handlers; the first pattern that matches a
request wins. A handler library covers static files, directory
listings, remote proxying, markdown, and JSON.

Basic usage::

    from sift import Response, serve, serve_json, serve_static

    serve(8000, {
        "/": lambda request, params: Response("Hello World!"),
        "/public/:filename+": serve_static("public"),
        "/users/:id": lambda request, params: serve_json({"id": params["id"]}),
    })
"""

__version__ = "0.1.0"
__all__ = [
    "AccessLog",
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "HandlerFailure",
    "NotFound",
    "PatternError",
    "Request",
    "Response",
    "SiftError",
    "json_error",
    "serve",
    "serve_directory",
    "serve_json",
    "serve_markdown",
    "serve_remote",
    "serve_static",
    "serve_tls",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sift`` fast while providing a clean top-level API.
    """
    if name in ("App", "serve", "serve_tls"):
        from sift import app as _app

        return getattr(_app, name)

    if name == "AppConfig":
        from sift.config import AppConfig

        return AppConfig

    if name == "AccessLog":
        from sift.log import AccessLog

        return AccessLog

    if name == "Request":
        from sift.http.request import Request

        return Request

    if name == "Response":
        from sift.http.response import Response

        return Response

    if name in (
        "json_error",
        "serve_directory",
        "serve_json",
        "serve_markdown",
        "serve_remote",
        "serve_static",
    ):
        from sift import handlers as _handlers

        return getattr(_handlers, name)

    if name in (
        "ConfigurationError",
        "HTTPError",
        "HandlerFailure",
        "NotFound",
        "PatternError",
        "SiftError",
    ):
        from sift import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
