"""Immutable HTTP request.

Only the metadata the dispatcher reads. The request body is never
consumed: static routes answer every method the same way.
"""

from __future__ import annotations

from dataclasses import dataclass

from burma_static._internal.asgi import Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request built from an ASGI scope."""

    method: str
    path: str
    query_string: bytes = b""

    @property
    def url(self) -> str:
        """Request target as the route table sees it (path + query string).

        The query string is kept: ``/about?x=1`` does not match ``/about``.
        """
        if self.query_string:
            return f"{self.path}?{self.query_string.decode('latin-1')}"
        return self.path

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b""),
        )
