"""Tests for splitme.routing.matcher — URL to match outcome."""

import pytest

from splitme.errors import ConfigurationError
from splitme.routes import ROUTES
from splitme.routing import (
    NO_MATCH,
    MatchError,
    RedirectTo,
    RenderProps,
    RoutingTable,
    match,
    redirect,
    view,
)
from splitme.views import pages


def _page(props: object) -> str:
    return "page"


class TestMatchOutcomes:
    def test_unknown_path(self) -> None:
        assert match(ROUTES, "/nowhere") is NO_MATCH

    def test_view(self) -> None:
        outcome = match(ROUTES, "/accounts")
        assert isinstance(outcome, RenderProps)
        assert outcome.view is pages.account_list
        assert outcome.params == {}
        assert outcome.location.pathname == "/accounts"

    def test_view_with_param(self) -> None:
        outcome = match(ROUTES, "/account/abc/expenses")
        assert isinstance(outcome, RenderProps)
        assert outcome.view is pages.account_detail
        assert outcome.params == {"id": "abc"}

    def test_query_kept_on_location(self) -> None:
        outcome = match(ROUTES, "/settings?locale=fr")
        assert isinstance(outcome, RenderProps)
        assert outcome.location.search == "locale=fr"
        assert outcome.location.href == "/settings?locale=fr"

    def test_fragment_ignored(self) -> None:
        outcome = match(ROUTES, "/accounts#top")
        assert isinstance(outcome, RenderProps)
        assert outcome.location.href == "/accounts"

    def test_static_route_before_param(self) -> None:
        outcome = match(ROUTES, "/account/add")
        assert isinstance(outcome, RenderProps)
        assert outcome.view is pages.account_add

    def test_int_param_converted(self) -> None:
        table = RoutingTable([view("/n/{n:int}", _page)])
        outcome = match(table, "/n/42")
        assert isinstance(outcome, RenderProps)
        assert outcome.params == {"n": 42}

    def test_percent_decoded_param(self) -> None:
        outcome = match(ROUTES, "/account/caf%C3%A9/expenses")
        assert isinstance(outcome, RenderProps)
        assert outcome.params == {"id": "café"}


class TestRedirects:
    def test_plain_redirect(self) -> None:
        table = RoutingTable([redirect("/a", "/b"), view("/b", _page)])
        assert match(table, "/a") == RedirectTo(pathname="/b")
        assert match(table, "/a").location == "/b"

    def test_query_carried_over(self) -> None:
        table = RoutingTable([redirect("/a", "/b")])
        outcome = match(table, "/a?x=1&y=2")
        assert isinstance(outcome, RedirectTo)
        assert outcome.location == "/b?x=1&y=2"

    def test_param_filled_in_target(self) -> None:
        outcome = match(ROUTES, "/account/42")
        assert isinstance(outcome, RedirectTo)
        assert outcome.location == "/account/42/expenses"

    def test_param_requoted_in_target(self) -> None:
        outcome = match(ROUTES, "/account/a%20b")
        assert isinstance(outcome, RedirectTo)
        assert outcome.pathname == "/account/a%20b/expenses"

    def test_account_alias(self) -> None:
        assert match(ROUTES, "/account") == RedirectTo(pathname="/accounts")

    def test_uncaptured_target_param_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="uncaptured"):
            RoutingTable([redirect("/a", "/b/{id}")])

    def test_relative_target_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="absolute"):
            RoutingTable([redirect("/a", "b")])


class TestMalformedUrls:
    @pytest.mark.parametrize(
        "url",
        [
            "/%zz",
            "/accounts/%E0%A4%A",
            "/account/%C3%28/expenses",
            "/account/a%00b",
        ],
    )
    def test_match_error(self, url: str) -> None:
        outcome = match(ROUTES, url)
        assert isinstance(outcome, MatchError)
        assert outcome.message

    def test_match_is_pure(self) -> None:
        assert match(ROUTES, "/settings") == match(ROUTES, "/settings")


class TestRoutingTable:
    def test_routes(self) -> None:
        table = RoutingTable([view("/", _page), redirect("/home", "/")])
        assert len(table) == 2
        assert [r.path for r in table.routes] == ["/", "/home"]

    def test_duplicate(self) -> None:
        with pytest.raises(ConfigurationError):
            RoutingTable([view("/", _page), view("/", _page)])
