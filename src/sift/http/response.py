"""Immutable HTTP response with a chainable ``with_*()`` API.

Each transformation returns a new Response; the original is never
modified.
"""

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from http import HTTPStatus
from typing import Any


def status_text(status: int) -> str:
    """Standard reason phrase for *status* (empty for unknown codes)."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


@dataclass(frozen=True, slots=True)
class Response:
    """What a handler sends back.

    Start from a body and chain ``with_*()`` calls for status and
    headers; every call returns a fresh copy.

    ``reason`` overrides the status phrase; left empty, the standard
    phrase for ``status`` is used.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()
    reason: str = ""

    def with_status(self, status: int) -> Response:
        """Copy with *status*."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Copy with one more header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Copy with every pair of *headers* appended."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        """Copy with *content_type*."""
        return replace(self, content_type=content_type)

    @property
    def status_text(self) -> str:
        """The reason phrase sent with the status line."""
        return self.reason or status_text(self.status)

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive)."""
        if name.lower() == "content-type":
            return self.content_type
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8 when it is text."""
        body = self.body
        return body.encode("utf-8") if isinstance(body, str) else body

    @property
    def text(self) -> str:
        body = self.body
        return body.decode("utf-8") if isinstance(body, bytes) else body

    def json(self) -> Any:
        """Body parsed as JSON."""
        return json_module.loads(self.body_bytes)
