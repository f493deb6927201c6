"""Access logging.

``AccessLog`` is the one object that writes the per-request line. It is
passed to the app explicitly (``App(access_log=...)``) rather than
reached through a module global, and it has a lifecycle: the ASGI
lifespan opens it at startup and closes it at shutdown.

Log line format::

    GET /users/42 3ms 200
"""

import logging

ACCESS_LOGGER = "sift.access"


class AccessLog:
    """Writes one line per request to a ``logging.Logger``.

    Usage::

        log = AccessLog(logging.getLogger("myapp.access"))
        app = App(routes, access_log=log)

    Lines written before ``open()`` or after ``close()`` are still
    emitted; the lifecycle only brackets the startup/shutdown messages.
    """

    __slots__ = ("_logger", "_open")

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(ACCESS_LOGGER)
        self._open = False

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self, host: str, port: int) -> None:
        """Mark the log as live and announce the listening address."""
        self._open = True
        self._logger.info("Server is starting at %s:%d", host, port)

    def close(self) -> None:
        if self._open:
            self._logger.info("Server stopped")
        self._open = False

    def request(self, method: str, path: str, elapsed_ms: int, status: int) -> None:
        """Write the access line for one completed request."""
        self._logger.info("%s %s %dms %d", method, path, elapsed_ms, status)
