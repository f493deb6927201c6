"""Request dispatch: one request in, exactly one response out.

The dispatcher scans the route table in definition order, calls the
first matching handler with ``(request, params)``, and normalizes
whatever comes back. No match, a raised exception, a returned error,
or a failure while building the request all end in a JSON error
response; nothing propagates to the server. Every request produces
one access log line.
"""

import time

from sift._internal.asgi import Receive, Scope
from sift._internal.invoke import invoke
from sift.errors import NotFound
from sift.http.request import Request
from sift.http.response import Response
from sift.log import AccessLog
from sift.routing.router import Router
from sift.server.errors import error_response, handle_raised_error
from sift.server.negotiation import negotiate


class Dispatcher:
    """Maps requests to handlers through an ordered ``Router``.

    Usage::

        dispatcher = Dispatcher(router, access_log=AccessLog())
        response = await dispatcher.handle(request)
    """

    __slots__ = ("_access_log", "_expose_messages", "_router")

    def __init__(
        self,
        router: Router,
        *,
        access_log: AccessLog | None = None,
        expose_messages: bool = False,
    ) -> None:
        self._router = router
        self._access_log = access_log or AccessLog()
        self._expose_messages = expose_messages

    @property
    def router(self) -> Router:
        return self._router

    async def handle_scope(self, scope: Scope, receive: Receive) -> Response:
        """Build a Request from an ASGI scope, then dispatch it."""
        start = time.monotonic()
        try:
            request = Request.from_asgi(scope, receive)
        except Exception as exc:
            method = str(scope.get("method", "-"))
            path = str(scope.get("path", "-"))
            response = handle_raised_error(
                exc, method, path, expose_messages=self._expose_messages
            )
            self._log(method, path, start, response)
            return response
        return await self.handle(request, start=start)

    async def handle(self, request: Request, *, start: float | None = None) -> Response:
        """Dispatch *request*. Never raises."""
        if start is None:
            start = time.monotonic()
        try:
            response = await self._dispatch(request)
        except Exception as exc:
            response = handle_raised_error(
                exc, request.method, request.path, expose_messages=self._expose_messages
            )
        self._log(request.method, request.path, start, response)
        return response

    async def _dispatch(self, request: Request) -> Response:
        match = self._router.match(request.path)
        if match is None:
            return error_response(NotFound(), expose_messages=self._expose_messages)

        request = request.with_path_params(match.path_params)
        result = await invoke(match.route.handler, request, match.path_params)
        return negotiate(result, request, expose_messages=self._expose_messages)

    def _log(self, method: str, path: str, start: float, response: Response) -> None:
        elapsed_ms = int((time.monotonic() - start) * 1000)
        self._access_log.request(method, path, elapsed_ms, response.status)
