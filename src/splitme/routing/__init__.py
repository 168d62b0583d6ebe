"""Routing — static route table compiled into a trie, and the matcher
that turns a URL into a render, redirect, error or not-found outcome.
"""

from splitme.routing.matcher import (
    NO_MATCH,
    MatchError,
    MatchOutcome,
    NoMatch,
    RedirectTo,
    RenderProps,
    match,
)
from splitme.routing.route import Location, RedirectRoute, ViewRoute
from splitme.routing.table import RoutingTable, redirect, view

__all__ = [
    "NO_MATCH",
    "Location",
    "MatchError",
    "MatchOutcome",
    "NoMatch",
    "RedirectRoute",
    "RedirectTo",
    "RenderProps",
    "RoutingTable",
    "ViewRoute",
    "match",
    "redirect",
    "view",
]
