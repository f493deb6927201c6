"""Sift exception hierarchy.

Shared across Router, App, the dispatcher, and the handler library so
every module raises (or returns) and catches the same types.
"""

from dataclasses import dataclass


class SiftError(Exception):
    """Base for all sift-specific errors."""


class ConfigurationError(SiftError):
    """Raised when app configuration is invalid.

    Typically caught during ``App._freeze()`` at startup.
    """


class PatternError(SiftError):
    """Raised when a route pattern cannot be parsed."""


@dataclass(frozen=True, slots=True)
class HTTPError(SiftError):
    """An error that maps directly to an HTTP status code.

    Handlers may raise it or return it as a value. Either way the
    dispatcher translates it into a JSON error response.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: no route matched, or the filesystem entry is absent."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class HandlerFailure(HTTPError):  # noqa: N818
    """500: a handler could not produce a response."""

    def __init__(self, detail: str = "Internal Server Error") -> None:
        super().__init__(status=500, detail=detail)


class BadGateway(HTTPError):  # noqa: N818
    """502: an upstream resource could not be fetched."""

    def __init__(self, detail: str = "Bad Gateway") -> None:
        super().__init__(status=502, detail=detail)
