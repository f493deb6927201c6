"""Write a Response to ASGI ``send()``."""

from sift._internal.asgi import Send
from sift.http.response import Response

# Recomputed for the body actually sent; a handler-supplied value would be stale.
_FRAMING_HEADERS = frozenset({b"content-length", b"transfer-encoding", b"connection"})

# 1xx, 204 and 304 never carry a body
_BODYLESS = frozenset({204, 304})


def _may_have_body(status: int) -> bool:
    return status >= 200 and status not in _BODYLESS


def declared_length(response: Response) -> int | None:
    """The ``content-length`` the handler set, when it is a valid count."""
    value = response.header("content-length")
    if value is None or not value.strip().isdigit():
        return None
    return int(value)


def build_headers(
    response: Response, body: bytes, *, length: int | None = None
) -> list[tuple[bytes, bytes]]:
    """Raw ASGI header pairs for *response* with a body of *body*.

    ``content-length`` is ``len(body)`` unless *length* is given.
    """
    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    for name, value in response.headers:
        key = name.lower().encode("latin-1")
        if key not in _FRAMING_HEADERS and key != b"content-type":
            headers.append((key, value.encode("latin-1")))
    headers.append((b"content-length", b"%d" % (len(body) if length is None else length)))
    return headers


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Send *response* as a start message and a single body message.

    ``HEAD`` responses advertise the full length but send no body bytes.
    A bodiless ``HEAD`` response (a proxied one, say) keeps the length its
    handler declared.
    """
    body = response.body_bytes if _may_have_body(response.status) else b""
    length = None
    if head and not body and _may_have_body(response.status):
        length = declared_length(response)
    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": build_headers(response, body, length=length),
        }
    )
    await send({"type": "http.response.body", "body": b"" if head else body})
