"""ASGI response sending — translates responses and files to ASGI messages.

Whole-body responses carry a ``content-length``. Files streamed from
disk are sent in chunks with ``more_body=True`` and closed with an
empty body.
"""

from pathlib import Path

import anyio

from burma_static._internal.asgi import Send
from burma_static.http.pages import NOT_FOUND_HTML
from burma_static.http.response import Response

# Read size for streamed files
CHUNK_SIZE = 64 * 1024


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _raw_headers(response: Response) -> list[tuple[bytes, bytes]]:
    raw_headers: list[tuple[bytes, bytes]] = []
    if response.content_type is not None:
        raw_headers.append((b"content-type", response.content_type.encode("latin-1")))
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    return raw_headers


async def send_response(response: Response, send: Send) -> None:
    """Translate a Response into ASGI send() calls."""
    raw_headers = _raw_headers(response)
    body = response.body_bytes if _body_allowed(response.status) else b""
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )


async def send_content(content: str | bytes, send: Send, *, content_type: str | None = None) -> None:
    """Send *content* as a 200 response."""
    await send_response(Response(body=content, status=200, content_type=content_type), send)


async def send_not_found(send: Send, html: str = NOT_FOUND_HTML) -> None:
    """Send the 404 document."""
    await send_response(Response(body=html, status=404), send)


async def send_file(
    path: str | Path,
    send: Send,
    *,
    content_type: str | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> None:
    """Stream the file at *path* as a 200 response.

    Opens its own read stream; nothing read here is cached. The file is
    opened before the response starts, so a missing file raises
    without sending anything.
    """
    response = Response(status=200, content_type=content_type)
    async with await anyio.open_file(path, "rb") as stream:
        await send(
            {
                "type": "http.response.start",
                "status": response.status,
                "headers": _raw_headers(response),
            }
        )
        while chunk := await stream.read(chunk_size):
            await send(
                {
                    "type": "http.response.body",
                    "body": chunk,
                    "more_body": True,
                }
            )

    # Close the stream
    await send(
        {
            "type": "http.response.body",
            "body": b"",
            "more_body": False,
        }
    )
