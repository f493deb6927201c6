"""Tests for sift.app: route registration, freezing, lifespan, startup."""

from typing import Any

import pytest

from sift import App, AppConfig, Response, serve, serve_tls
from sift.errors import ConfigurationError, PatternError
from sift.log import AccessLog
from sift.testing import TestClient


def _hello(request, params):
    return Response("Hello World!")


class FakeRunner:
    """Stands in for ``run_server`` and records how it was called."""

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append((args, kwargs))


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    fake = FakeRunner()
    monkeypatch.setattr("sift.server.runner.run_server", fake)
    return fake


class TestRegistration:
    def test_mapping_routes_keep_order(self) -> None:
        app = App({"/b": _hello, "/a": _hello})
        assert [route.path for route in app.router.routes] == ["/b", "/a"]

    def test_sequence_routes(self) -> None:
        app = App([("/x", _hello), ("/x", _hello)])
        assert len(app.router) == 2

    def test_decorator(self) -> None:
        app = App()

        @app.route("/health")
        def health(request, params):
            return {"ok": True}

        assert app.router.match("/health") is not None

    def test_decorator_returns_function(self) -> None:
        app = App()
        decorated = app.route("/")(_hello)
        assert decorated is _hello

    def test_invalid_pattern_rejected_early(self) -> None:
        app = App()
        with pytest.raises(PatternError):
            app.add_route("/users/:id(", _hello)

    def test_cannot_add_after_freeze(self) -> None:
        app = App({"/": _hello})
        app._ensure_frozen()
        with pytest.raises(RuntimeError, match="Cannot modify"):
            app.add_route("/late", _hello)

    def test_freeze_is_idempotent(self) -> None:
        app = App({"/": _hello})
        first = app.router
        assert app.router is first


class TestConfigAtFreeze:
    def test_cert_without_key(self) -> None:
        app = App({"/": _hello}, AppConfig(ssl_certfile="cert.pem"))
        with pytest.raises(ConfigurationError, match="ssl_keyfile"):
            app._ensure_frozen()

    def test_strict_slashes(self) -> None:
        app = App({"/about": _hello}, AppConfig(strip_trailing_slash=False))
        assert app.router.match("/about/") is None


class TestLifespan:
    async def test_startup_and_shutdown(self, caplog: pytest.LogCaptureFixture) -> None:
        app = App({"/": _hello})
        messages = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return next(messages)

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        scope = {"type": "lifespan", "server": ("0.0.0.0", 8080)}
        with caplog.at_level("INFO", logger="sift.access"):
            await app(scope, receive, send)

        assert [m["type"] for m in sent] == [
            "lifespan.startup.complete",
            "lifespan.shutdown.complete",
        ]
        logged = [r.getMessage() for r in caplog.records if r.name == "sift.access"]
        assert logged == ["Server is starting at 0.0.0.0:8080", "Server stopped"]
        assert not app.access_log.is_open

    async def test_startup_failure_reported(self) -> None:
        app = App({"/": _hello}, AppConfig(ssl_keyfile="key.pem"))
        messages = iter([{"type": "lifespan.startup"}])
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return next(messages)

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)

        assert sent[0]["type"] == "lifespan.startup.failed"
        assert "ssl_certfile" in sent[0]["message"]

    async def test_custom_access_log(self, caplog: pytest.LogCaptureFixture) -> None:
        import logging

        log = AccessLog(logging.getLogger("myapp.access"))
        app = App({"/": _hello}, access_log=log)

        with caplog.at_level("INFO", logger="myapp.access"):
            async with TestClient(app) as client:
                await client.get("/")

        names = {r.name for r in caplog.records}
        assert "myapp.access" in names
        assert "sift.access" not in names


class TestOtherScopes:
    async def test_websocket_ignored(self) -> None:
        app = App({"/": _hello})
        sent: list[dict[str, Any]] = []

        async def receive() -> dict[str, Any]:
            return {"type": "websocket.connect"}

        async def send(message: dict[str, Any]) -> None:
            sent.append(message)

        await app({"type": "websocket", "path": "/"}, receive, send)
        assert sent == []


class TestStartup:
    def test_run_uses_config(self, runner: FakeRunner) -> None:
        app = App({"/": _hello}, AppConfig(host="0.0.0.0", port=9000, debug=True))
        app.run()

        (args, kwargs) = runner.calls[0]
        assert args == (app, "0.0.0.0", 9000)
        assert kwargs["debug"] is True

    def test_run_overrides(self, runner: FakeRunner) -> None:
        app = App({"/": _hello})
        app.run(host="localhost", port=0)

        (args, _) = runner.calls[0]
        assert args[1:] == ("localhost", 0)

    def test_serve(self, runner: FakeRunner) -> None:
        serve(8080, {"/": _hello})

        (args, kwargs) = runner.calls[0]
        assert isinstance(args[0], App)
        assert args[2] == 8080
        assert kwargs["ssl_certfile"] is None
        assert args[0].router.match("/") is not None

    def test_serve_tls(self, runner: FakeRunner) -> None:
        serve_tls(8443, {"/": _hello}, "cert.pem", "key.pem")

        (args, kwargs) = runner.calls[0]
        assert args[2] == 8443
        assert kwargs["ssl_certfile"] == "cert.pem"
        assert kwargs["ssl_keyfile"] == "key.pem"

    def test_serve_tls_keeps_other_config(self, runner: FakeRunner) -> None:
        serve_tls(
            8443,
            {"/": _hello},
            "cert.pem",
            "key.pem",
            config=AppConfig(host="0.0.0.0", log_level="debug"),
        )

        (args, kwargs) = runner.calls[0]
        assert args[1] == "0.0.0.0"
        assert kwargs["log_level"] == "debug"
