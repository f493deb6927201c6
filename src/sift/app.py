"""Sift application class.

Mutable during setup (route registration). Frozen at runtime when
``app.run()`` or ``__call__()`` is first invoked.
"""

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace

from sift._internal.asgi import Receive, Scope, Send
from sift._internal.types import Handler, RouteTable
from sift.config import AppConfig
from sift.log import AccessLog
from sift.routing.pattern import RoutePattern
from sift.routing.router import Router
from sift.server.dispatcher import Dispatcher
from sift.server.handler import handle_request


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler


class App:
    """The sift application: an ordered route table served over ASGI.

    Usage::

        app = App({
            "/": lambda request, params: Response("Hello World!"),
            "/users/:id": show_user,
        })

        @app.route("/health")
        def health(request, params):
            return serve_json({"ok": True})

        app.run(port=8000)

    Routes are tried in the order they were given; the first match wins.

    Thread safety:
        Setup is single-threaded. The freeze transition uses a Lock +
        double-check so exactly one thread compiles the route table even
        if several workers receive their first request at once.
    """

    __slots__ = (
        "_access_log",
        "_dispatcher",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_router",
        "config",
    )

    def __init__(
        self,
        routes: RouteTable | None = None,
        config: AppConfig | None = None,
        *,
        access_log: AccessLog | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        self._access_log: AccessLog = access_log or AccessLog()
        self._pending_routes: list[_PendingRoute] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._router: Router | None = None
        self._dispatcher: Dispatcher | None = None

        if routes is not None:
            items = routes.items() if isinstance(routes, Mapping) else routes
            for path, handler in items:
                self.add_route(path, handler)

    # -- Route registration --

    def add_route(self, path: str, handler: Handler) -> None:
        """Append a route to the table.

        Raises ``PatternError`` if *path* is not a valid route pattern.
        """
        self._check_not_frozen()
        RoutePattern.compile(path)
        self._pending_routes.append(_PendingRoute(path, handler))

    def route(self, path: str) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Route pattern, e.g. ``/users/:id`` or ``/files/:filename+``.
        """

        def decorator(func: Handler) -> Handler:
            self.add_route(path, func)
            return func

        return decorator

    @property
    def router(self) -> Router:
        """The compiled route table (freezes the app)."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    @property
    def access_log(self) -> AccessLog:
        return self._access_log

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Compile the app and serve it until interrupted.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        from sift.server.runner import run_server

        run_server(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            debug=self.config.debug,
            workers=self.config.workers,
            log_level=self.config.log_level,
            log_format=self.config.log_format,
            ssl_certfile=self.config.ssl_certfile,
            ssl_keyfile=self.config.ssl_keyfile,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        self._ensure_frozen()
        assert self._dispatcher is not None
        await handle_request(scope, receive, send, dispatcher=self._dispatcher)

    async def _handle_lifespan(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Startup freezes the app and opens the access log; shutdown
        closes it.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                server = scope.get("server")
                host, port = server if server else (self.config.host, self.config.port)
                self._access_log.open(host, port)
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                self._access_log.close()
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        self.config.validate()

        router = Router(strip_trailing_slash=self.config.strip_trailing_slash)
        for pending in self._pending_routes:
            router.add(pending.path, pending.handler)
        router.compile()
        self._router = router

        self._dispatcher = Dispatcher(
            router,
            access_log=self._access_log,
            expose_messages=self.config.expose_error_messages,
        )
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes before calling app.run()."
            )
            raise RuntimeError(msg)


def serve(
    port: int,
    routes: RouteTable,
    *,
    host: str | None = None,
    config: AppConfig | None = None,
    access_log: AccessLog | None = None,
) -> None:
    """Serve *routes* on *port* until interrupted.

    Example::

        serve(8000, {
            "/": lambda request, params: Response("Hello World!"),
        })
    """
    App(routes, config, access_log=access_log).run(host=host, port=port)


def serve_tls(
    port: int,
    routes: RouteTable,
    certfile: str,
    keyfile: str,
    *,
    host: str | None = None,
    config: AppConfig | None = None,
    access_log: AccessLog | None = None,
) -> None:
    """Like ``serve``, over TLS with the given certificate and key files."""
    base = config or AppConfig()
    tls_config = replace(base, ssl_certfile=certfile, ssl_keyfile=keyfile)
    App(routes, tls_config, access_log=access_log).run(host=host, port=port)
