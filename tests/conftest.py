"""Shared fixtures: temporary static roots and an app wired to them."""

import json

import pytest

from splitme.app import App
from splitme.config import AppConfig
from splitme.http.headers import Headers
from splitme.http.query import QueryParams
from splitme.http.request import Request


@pytest.fixture
def site(tmp_path):
    """Public and static roots with a few files each."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "robots.txt").write_text("User-agent: *\nDisallow:\n")
    (public / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")

    static = tmp_path / "static"
    static.mkdir()
    (static / "browser.3f2a1c.js").write_text("console.log('split');")
    (static / "index.html").write_text("<h1>static index</h1>")
    return tmp_path


@pytest.fixture
def config(site) -> AppConfig:
    return AppConfig(public_dir=site / "public", static_dir=site / "static")


@pytest.fixture
def app(config) -> App:
    return App(config)


@pytest.fixture
def locales_dir(tmp_path):
    """A small en/fr translation set."""
    directory = tmp_path / "locales"
    directory.mkdir()
    (directory / "en.json").write_text(
        json.dumps(
            {
                "greeting": "Hello %{name}",
                "nested": {"key": "Nested value"},
                "apples": "%{smart_count} apple |||| %{smart_count} apples",
            }
        )
    )
    (directory / "fr.json").write_text(
        json.dumps(
            {
                "greeting": "Bonjour %{name}",
                "nested": {"key": "Valeur imbriquée"},
                "apples": "%{smart_count} pomme |||| %{smart_count} pommes",
            }
        )
    )
    return directory


@pytest.fixture
def make_request():
    """Factory for Requests built the way the ASGI handler would."""

    def _make(
        path: str = "/",
        *,
        query: str = "",
        headers: dict[str, str] | None = None,
        method: str = "GET",
    ) -> Request:
        return Request(
            method=method,
            path=path,
            headers=Headers.from_dict(headers or {}),
            query=QueryParams(query),
            raw_path=path.encode("latin-1"),
        )

    return _make
