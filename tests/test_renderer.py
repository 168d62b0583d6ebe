"""Tests for splitme.render.renderer — matched route to full page."""

import pytest

from splitme.assets import AssetManifest
from splitme.config import AppConfig
from splitme.i18n import LocaleStore
from splitme.render import Renderer, RequestContext
from splitme.routes import ROUTES
from splitme.routing import RenderProps, match
from splitme.templating import PageTemplate


@pytest.fixture
async def renderer() -> Renderer:
    store = LocaleStore()
    await store.load_all()
    return Renderer(
        store,
        PageTemplate.from_path(),
        AssetManifest(js="/browser.3f2a1c.js", css="/main.9b8e.css"),
        AppConfig(),
    )


def _props(url: str) -> RenderProps:
    outcome = match(ROUTES, url)
    assert isinstance(outcome, RenderProps)
    return outcome


class TestRender:
    async def test_page_shell(self, renderer) -> None:
        html = renderer.render(RequestContext("en", False, "/"), _props("/"))
        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="en">' in html
        assert "<title>Split Me</title>" in html
        assert '<script src="/browser.3f2a1c.js" async></script>' in html
        assert '<link rel="stylesheet" href="/main.9b8e.css">' in html
        assert "{{" not in html
        assert "<!--" not in html

    async def test_markup_not_escaped(self, renderer) -> None:
        html = renderer.render(RequestContext("en", False, "/accounts"), _props("/accounts"))
        assert '<div id="root"><div class="main" data-locale="en">' in html
        assert '<div id="modal"' in html

    async def test_view_title(self, renderer) -> None:
        html = renderer.render(RequestContext("fr", False, "/accounts"), _props("/accounts"))
        assert "<title>Mes comptes</title>" in html
        assert '<html lang="fr">' in html

    async def test_params_reach_view(self, renderer) -> None:
        url = "/account/42/expenses"
        html = renderer.render(RequestContext("en", False, url), _props(url))
        assert "<title>Account 42</title>" in html
        assert "0 expenses" in html

    async def test_description(self, renderer) -> None:
        html = renderer.render(RequestContext("en", False, "/"), _props("/"))
        assert '<meta name="description" content="Split Me is the easiest way' in html

    async def test_deterministic(self, renderer) -> None:
        context = RequestContext("en", False, "/settings")
        assert renderer.render(context, _props("/settings")) == renderer.render(
            context, _props("/settings")
        )


class TestBotMetadata:
    async def test_bot_gets_alternates(self, renderer) -> None:
        html = renderer.render(RequestContext("en", True, "/"), _props("/"))
        assert '<meta property="og:locale" content="en_US">' in html
        assert '<meta property="og:locale:alternate" content="fr_FR">' in html
        assert 'og:locale:alternate" content="en_US"' not in html

    async def test_bot_in_french(self, renderer) -> None:
        html = renderer.render(RequestContext("fr", True, "/"), _props("/"))
        assert '<meta property="og:locale" content="fr_FR">' in html
        assert '<meta property="og:locale:alternate" content="en_US">' in html

    async def test_browser_gets_none(self, renderer) -> None:
        html = renderer.render(RequestContext("en", False, "/"), _props("/"))
        assert "og:locale" not in html
