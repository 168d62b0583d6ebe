"""Immutable HTTP response.

``with_header`` returns a new Response; the original is never changed.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return default

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


def text_response(body: str, status: int) -> Response:
    """Plain-text response, as used for error and not-found bodies."""
    return Response(body=body, status=status, content_type="text/plain; charset=utf-8")


def redirect_response(location: str, status: int = 302) -> Response:
    """Redirect with a ``Location`` header and a short text body."""
    return text_response(f"Found. Redirecting to {location}", status).with_header(
        "Location", location
    )
