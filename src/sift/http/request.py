"""The request object handlers receive.

Everything the server told us about the request is frozen at creation;
only the body is read lazily, once, from the ASGI ``receive`` callable.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import quote

from sift._internal.asgi import Receive, Scope
from sift.http.headers import Headers
from sift.http.query import QueryParams


def _address(value: Any) -> tuple[str, int] | None:
    return (value[0], value[1]) if value else None


def _raw_path(scope: Scope) -> str:
    raw = scope.get("raw_path")
    if raw:
        return raw.decode("latin-1")
    return quote(scope["path"])


@dataclass(frozen=True, slots=True)
class Request:
    """One HTTP request, as seen by a handler.

    ``path`` is the percent-decoded path the route table matches
    against. ``raw_path`` keeps the encoding the client sent, and
    ``url`` (``raw_path`` plus query string) is the target forwarded
    upstream. The body is available through ``await request.body()``
    (or ``text()`` and ``json()``).
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    path_params: dict[str, str]
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None
    scheme: str = "http"
    raw_path: str = ""

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    # Shared between copies made by with_path_params()
    _cache: dict[str, bytes] = field(default_factory=dict, repr=False, compare=False)

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    @property
    def url(self) -> str:
        """Still-encoded path plus query string, the target to forward upstream."""
        path = self.raw_path or quote(self.path)
        query = self.query.raw
        return f"{path}?{query}" if query else path

    async def stream(self) -> AsyncGenerator[bytes]:
        """Yield body chunks as the server delivers them."""
        if self._receive is None:
            return
        more = True
        while more:
            message = await self._receive()
            if chunk := message.get("body", b""):
                yield chunk
            more = message.get("more_body", False)

    async def body(self) -> bytes:
        """The whole body; later calls return the same bytes."""
        if "body" not in self._cache:
            self._cache["body"] = b"".join([chunk async for chunk in self.stream()])
        return self._cache["body"]

    async def text(self) -> str:
        return (await self.body()).decode("utf-8")

    async def json(self) -> Any:
        return json_module.loads(await self.body())

    def with_path_params(self, path_params: dict[str, str]) -> Request:
        """Copy of this request carrying the params of the matched route."""
        return replace(self, path_params=path_params)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive | None = None) -> Request:
        """Build a Request from an ASGI HTTP scope.

        Raises ``KeyError`` when the scope lacks ``method`` or ``path``.
        """
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            path_params={},
            http_version=scope.get("http_version", "1.1"),
            server=_address(scope.get("server")),
            client=_address(scope.get("client")),
            scheme=scope.get("scheme", "http"),
            raw_path=_raw_path(scope),
            _receive=receive,
        )
