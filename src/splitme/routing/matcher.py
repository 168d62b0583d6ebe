"""URL -> match outcome.

``match()`` is a pure function of the routing table and the URL. It
never performs I/O and never raises for bad input: a malformed URL is
reported as ``MatchError`` so the server can answer it with a 500.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Final
from urllib.parse import quote, unquote

from splitme.errors import NotFound
from splitme.routing.params import convert_param
from splitme.routing.route import Location, RedirectRoute, ViewRoute
from splitme.routing.router import parse_path
from splitme.routing.table import RoutingTable

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True, slots=True)
class MatchError:
    """Matching itself failed."""

    message: str


@dataclass(frozen=True, slots=True)
class RedirectTo:
    """The URL should be redirected; the original query is carried over."""

    pathname: str
    search: str = ""

    @property
    def location(self) -> str:
        if self.search:
            return f"{self.pathname}?{self.search}"
        return self.pathname


@dataclass(frozen=True, slots=True)
class RenderProps:
    """A view matched: what to mount and with which parameters."""

    view: Callable[..., Any]
    params: Mapping[str, str | int]
    location: Location
    route: ViewRoute = field(repr=False)


class NoMatch:
    """No route matched. Use the ``NO_MATCH`` singleton."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH: Final = NoMatch()

type MatchOutcome = MatchError | RedirectTo | RenderProps | NoMatch


def split_url(url: str) -> tuple[str, str]:
    """Split a request target into ``(path, query)``; fragments are dropped."""
    url = url.split("#", 1)[0]
    path, _, query = url.partition("?")
    return path or "/", query


def decode_segments(path: str) -> list[str]:
    """Percent-decode each path segment strictly.

    Raises ``ValueError`` for malformed escapes, invalid UTF-8 or NUL bytes.
    """
    if _BAD_ESCAPE.search(path):
        msg = f"URI malformed: {path!r}"
        raise ValueError(msg)
    parts: list[str] = []
    for raw in path.split("/"):
        if not raw:
            continue
        try:
            part = unquote(raw, errors="strict")
        except UnicodeDecodeError:
            msg = f"URI malformed: {path!r}"
            raise ValueError(msg) from None
        if "\x00" in part:
            msg = f"URI contains a NUL byte: {path!r}"
            raise ValueError(msg)
        parts.append(part)
    return parts


def match(table: RoutingTable, url: str) -> MatchOutcome:
    """Match *url* (path plus optional query) against *table*."""
    path, query = split_url(url)
    try:
        parts = decode_segments(path)
    except ValueError as exc:
        return MatchError(str(exc))

    try:
        found = table.router.match(parts)
    except NotFound:
        return NO_MATCH

    route = found.route
    if isinstance(route, RedirectRoute):
        return RedirectTo(pathname=_fill_target(route.to, found.path_params), search=query)

    try:
        params = _convert(route, found.path_params)
    except ValueError as exc:
        return MatchError(str(exc))
    return RenderProps(
        view=route.view,
        params=params,
        location=Location(pathname="/" + "/".join(parts), search=query),
        route=route,
    )


def _fill_target(target: str, params: Mapping[str, str]) -> str:
    # Names are checked when the table is built
    return re.sub(r"\{(\w+)\}", lambda m: quote(params[m.group(1)], safe=""), target)


def _convert(route: ViewRoute, raw: Mapping[str, str]) -> dict[str, str | int]:
    types = {seg.param_name: seg.param_type for seg in parse_path(route.path) if seg.is_param}
    return {name: convert_param(name, value, types.get(name, "str")) for name, value in raw.items()}
