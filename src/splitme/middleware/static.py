"""Static file serving middleware.

Serves files from a directory for matching URL prefixes and falls
through to the next handler when nothing on disk matches. Responses
carry a strong ``ETag``; a matching ``If-None-Match`` gets a 304.
"""

import hashlib
import mimetypes
from pathlib import Path

import anyio

from splitme.http.request import Request
from splitme.http.response import Response
from splitme.middleware.protocol import Next

ONE_YEAR = 365 * 24 * 60 * 60


class StaticFiles:
    """Middleware that serves static files from a directory.

    Security: resolves symlinks and verifies the final path is within
    the configured directory to prevent path traversal.

    Usage::

        # Always revalidated
        app.add_middleware(StaticFiles("server/public", cache_control="no-cache"))

        # Hashed build output, no directory index
        app.add_middleware(StaticFiles(
            "server/static",
            cache_control=f"public, max-age={ONE_YEAR}",
            index=None,
        ))
    """

    __slots__ = ("_cache_control", "_directory", "_index", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/",
        *,
        index: str | None = "index.html",
        cache_control: str = "public, max-age=0",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._cache_control = cache_control

        # Root prefix "/" normalizes to ""
        stripped = "/" + prefix.strip("/")
        self._prefix = stripped if stripped != "/" else ""

    @property
    def directory(self) -> Path:
        return self._directory

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a static file or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        path = request.path
        if self._prefix:
            if not path.startswith(self._prefix + "/") and path != self._prefix:
                return await next(request)
            relative = path[len(self._prefix) :].lstrip("/")
        else:
            relative = path.lstrip("/")

        if "\x00" in relative:
            return await next(request)

        file_path = (self._directory / relative).resolve() if relative else self._directory
        if not file_path.is_relative_to(self._directory):
            return Response(body="Forbidden", status=403, content_type="text/plain; charset=utf-8")

        if file_path.is_dir():
            if self._index is None:
                return await next(request)
            index_path = file_path / self._index
            if not index_path.is_file():
                return await next(request)
            if not path.endswith("/") and relative:
                return Response(body="", status=301).with_header("Location", path + "/")
            file_path = index_path

        if not file_path.is_file():
            return await next(request)

        return await self._serve_file(file_path, request)

    async def _serve_file(self, file_path: Path, request: Request) -> Response:
        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"
        elif content_type.startswith("text/") or content_type in (
            "application/javascript",
            "application/json",
        ):
            content_type = f"{content_type}; charset=utf-8"

        body = await anyio.Path(file_path).read_bytes()
        etag = f'"{hashlib.sha1(body, usedforsecurity=False).hexdigest()}"'

        if _etag_matches(request.headers.get("if-none-match"), etag):
            return (
                Response(body=b"", status=304, content_type=content_type)
                .with_header("ETag", etag)
                .with_header("Cache-Control", self._cache_control)
            )

        return (
            Response(body=body, content_type=content_type)
            .with_header("ETag", etag)
            .with_header("Cache-Control", self._cache_control)
        )


def _etag_matches(header: str | None, etag: str) -> bool:
    if not header:
        return False
    if header.strip() == "*":
        return True
    candidates = {tag.strip().removeprefix("W/") for tag in header.split(",")}
    return etag in candidates
