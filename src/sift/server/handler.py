"""ASGI handler: the only component that touches raw HTTP scopes.

Hands the scope to the dispatcher and sends the resulting Response
back through ASGI ``send()``.
"""

from sift._internal.asgi import Receive, Scope, Send
from sift.server.dispatcher import Dispatcher
from sift.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatcher: Dispatcher,
) -> None:
    """Process a single HTTP request through the dispatcher."""
    if scope["type"] != "http":
        return

    response = await dispatcher.handle_scope(scope, receive)
    await send_response(response, send, head=scope.get("method") == "HEAD")
