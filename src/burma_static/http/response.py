"""HTTP response value handed to the sender.

``content_type=None`` means no ``Content-Type`` header is sent at all,
which is how static routes answer unless
``StaticConfig.send_content_type`` is enabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Response:
    """An immutable HTTP response."""

    body: str | bytes = b""
    status: int = 200
    content_type: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body
