"""Tests for static file serving middleware."""

import pytest

from splitme.http.response import Response
from splitme.middleware.static import ONE_YEAR, StaticFiles


async def _fallthrough(request) -> Response:
    return Response(body="fallthrough", status=404)


@pytest.fixture
def public(site):
    return site / "public"


@pytest.fixture
def static(site):
    return site / "static"


class TestStaticFileServing:
    async def test_serves_file(self, public, make_request) -> None:
        mw = StaticFiles(public, cache_control="no-cache")
        response = await mw(make_request("/robots.txt"), _fallthrough)
        assert response.status == 200
        assert response.text.startswith("User-agent")
        assert response.content_type == "text/plain; charset=utf-8"
        assert response.header("Cache-Control") == "no-cache"

    async def test_binary_file(self, public, make_request) -> None:
        mw = StaticFiles(public)
        response = await mw(make_request("/favicon.ico"), _fallthrough)
        assert response.status == 200
        assert response.body_bytes == b"\x00\x00\x01\x00"

    async def test_long_lived_cache(self, static, make_request) -> None:
        mw = StaticFiles(static, cache_control=f"public, max-age={ONE_YEAR}", index=None)
        response = await mw(make_request("/browser.3f2a1c.js"), _fallthrough)
        assert response.status == 200
        assert response.header("Cache-Control") == "public, max-age=31536000"

    async def test_missing_file_falls_through(self, public, make_request) -> None:
        mw = StaticFiles(public)
        response = await mw(make_request("/nope.txt"), _fallthrough)
        assert response.text == "fallthrough"

    async def test_missing_directory_falls_through(self, tmp_path, make_request) -> None:
        mw = StaticFiles(tmp_path / "does-not-exist")
        response = await mw(make_request("/robots.txt"), _fallthrough)
        assert response.text == "fallthrough"

    async def test_non_get_falls_through(self, public, make_request) -> None:
        mw = StaticFiles(public)
        response = await mw(make_request("/robots.txt", method="POST"), _fallthrough)
        assert response.text == "fallthrough"

    async def test_prefix(self, public, make_request) -> None:
        mw = StaticFiles(public, prefix="/public")
        assert (await mw(make_request("/public/robots.txt"), _fallthrough)).status == 200
        assert (await mw(make_request("/robots.txt"), _fallthrough)).text == "fallthrough"


class TestDirectoryIndex:
    async def test_index_served(self, static, make_request) -> None:
        mw = StaticFiles(static)
        response = await mw(make_request("/"), _fallthrough)
        assert response.text == "<h1>static index</h1>"

    async def test_index_disabled(self, static, make_request) -> None:
        mw = StaticFiles(static, index=None)
        response = await mw(make_request("/"), _fallthrough)
        assert response.text == "fallthrough"


class TestETag:
    async def test_etag_and_304(self, public, make_request) -> None:
        mw = StaticFiles(public, cache_control="no-cache")
        first = await mw(make_request("/robots.txt"), _fallthrough)
        etag = first.header("ETag")
        assert etag is not None
        assert etag.startswith('"')

        second = await mw(
            make_request("/robots.txt", headers={"If-None-Match": etag}), _fallthrough
        )
        assert second.status == 304
        assert second.body_bytes == b""
        assert second.header("ETag") == etag
        assert second.header("Cache-Control") == "no-cache"

    async def test_weak_and_listed_tags(self, public, make_request) -> None:
        mw = StaticFiles(public)
        etag = (await mw(make_request("/robots.txt"), _fallthrough)).header("ETag")
        header = f'"stale", W/{etag}'
        response = await mw(make_request("/robots.txt", headers={"If-None-Match": header}), _fallthrough)
        assert response.status == 304

    async def test_stale_tag(self, public, make_request) -> None:
        mw = StaticFiles(public)
        response = await mw(
            make_request("/robots.txt", headers={"If-None-Match": '"stale"'}), _fallthrough
        )
        assert response.status == 200

    async def test_etag_changes_with_content(self, public, make_request) -> None:
        mw = StaticFiles(public)
        before = (await mw(make_request("/robots.txt"), _fallthrough)).header("ETag")
        (public / "robots.txt").write_text("User-agent: *\nDisallow: /\n")
        after = (await mw(make_request("/robots.txt"), _fallthrough)).header("ETag")
        assert before != after


class TestTraversal:
    async def test_parent_directory(self, public, make_request) -> None:
        mw = StaticFiles(public)
        response = await mw(make_request("/../static/index.html"), _fallthrough)
        assert response.status == 403

    async def test_nul_byte(self, public, make_request) -> None:
        mw = StaticFiles(public)
        response = await mw(make_request("/robots.txt\x00.png"), _fallthrough)
        assert response.text == "fallthrough"
