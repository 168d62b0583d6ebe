"""splitme exception hierarchy.

Startup failures (configuration, locale loading) are fatal and abort
the process before a listener is bound. ``HTTPError`` is the only kind
the request pipeline turns into a response.
"""

from dataclasses import dataclass


class SplitmeError(Exception):
    """Base for all splitme-specific errors."""


class ConfigurationError(SplitmeError):
    """Raised when startup configuration is invalid.

    Covers a missing or malformed asset manifest, a page template that
    references data the renderer never provides, and bad environment
    values. Never raised per request once startup has completed.
    """


class LocaleLoadError(SplitmeError):
    """A required locale could not be loaded."""

    def __init__(self, locale: str, reason: str) -> None:
        self.locale = locale
        self.reason = reason
        super().__init__(f"Failed to load locale {locale!r}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(SplitmeError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not found") -> None:
        super().__init__(status=404, detail=detail)
