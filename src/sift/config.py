"""Application configuration.

AppConfig is a frozen dataclass, checked once by ``validate()`` when the
app freezes.
"""

from dataclasses import dataclass

from sift.errors import ConfigurationError

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=3000, expose_error_messages=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 0  # 0 = auto-detect from CPU count (production only)

    # Routing
    strip_trailing_slash: bool = True

    # Error responses: surface str(exc) in 5xx bodies instead of the status phrase
    expose_error_messages: bool = False

    # Logging (forwarded to the server runtime)
    log_level: str = "info"
    log_format: str = "text"

    # TLS (optional)
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None

    @property
    def tls(self) -> bool:
        """True when both a certificate and a key are configured."""
        return bool(self.ssl_certfile and self.ssl_keyfile)

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if the configuration is inconsistent."""
        if bool(self.ssl_certfile) != bool(self.ssl_keyfile):
            msg = "TLS requires both ssl_certfile and ssl_keyfile."
            raise ConfigurationError(msg)
        if not 0 <= self.port <= 65535:
            msg = f"Invalid port {self.port!r}; expected 0-65535."
            raise ConfigurationError(msg)
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}; expected one of {', '.join(_LOG_LEVELS)}."
            raise ConfigurationError(msg)
