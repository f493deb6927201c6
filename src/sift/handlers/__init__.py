"""Handler library: prebuilt handlers to register in a route table.

Every factory returns a ``Handler`` called as ``handler(request, params)``::

    serve(8000, {
        "/": serve_static("public/index.html"),
        "/public/:filename+": serve_static("public"),
        "/todos/:id": serve_remote("https://jsonplaceholder.typicode.com"),
        "/docs/:filename+": serve_markdown("docs"),
        "/health": lambda request, params: serve_json({"ok": True}),
    })
"""

from sift.handlers.json_response import json_error, serve_json
from sift.handlers.listing import DirectoryEntry, format_size
from sift.handlers.markdown import serve_markdown
from sift.handlers.remote import serve_remote
from sift.handlers.static import serve_directory, serve_static

__all__ = [
    "DirectoryEntry",
    "format_size",
    "json_error",
    "serve_directory",
    "serve_json",
    "serve_markdown",
    "serve_remote",
    "serve_static",
]
