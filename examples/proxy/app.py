"""Proxy: forward ``/todos/:id`` to a remote JSON API.

The upstream path and query string are passed through unchanged, and
the upstream status, headers, and body come back verbatim. A failed
connection answers 502.

Run:
    cd examples/proxy && python app.py
    curl http://127.0.0.1:8000/todos/1
"""

from sift import App, serve_remote

UPSTREAM = "https://jsonplaceholder.typicode.com"


def create_app(transport=None) -> App:
    return App({"/todos/:id": serve_remote(UPSTREAM, transport=transport)})


app = create_app()


if __name__ == "__main__":
    app.run()
