"""Immutable HTTP request.

Only the metadata the render pipeline reads: the catch-all route never
consumes a request body.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from splitme.http.headers import Headers
from splitme.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str
    headers: Headers
    query: QueryParams
    http_version: str = "1.1"
    client: tuple[str, int] | None = None
    raw_path: bytes = b""

    @property
    def url(self) -> str:
        """Request target as sent by the client (path + query string)."""
        path = self.raw_path.decode("latin-1") if self.raw_path else self.path
        if self.query.raw:
            return f"{path}?{self.query.raw}"
        return path

    @property
    def user_agent(self) -> str | None:
        return self.headers.get("user-agent")

    @property
    def accept_language(self) -> str | None:
        return self.headers.get("accept-language")

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            raw_path=scope.get("raw_path") or b"",
        )
