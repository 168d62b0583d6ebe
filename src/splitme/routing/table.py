"""The static routing table.

Built once from a sequence of entries, compiled into a ``Router`` and
never mutated afterwards.
"""

import re
from collections.abc import Callable, Iterable
from typing import Any

from splitme.errors import ConfigurationError
from splitme.routing.route import RedirectRoute, RouteEntry, ViewRoute
from splitme.routing.router import Router, parse_path

_TARGET_PARAM = re.compile(r"\{(\w+)\}")


def view(path: str, component: Callable[..., Any], name: str | None = None) -> ViewRoute:
    """Shorthand for ``ViewRoute(path, component, name)``."""
    return ViewRoute(path=path, view=component, name=name)


def redirect(path: str, to: str) -> RedirectRoute:
    """Shorthand for ``RedirectRoute(path, to)``."""
    return RedirectRoute(path=path, to=to)


class RoutingTable:
    """An immutable, compiled set of view and redirect routes."""

    __slots__ = ("_router",)

    def __init__(self, entries: Iterable[RouteEntry]) -> None:
        router = Router()
        for entry in entries:
            if isinstance(entry, RedirectRoute):
                _check_redirect(entry)
            router.add(entry)
        router.compile()
        self._router = router

    @property
    def router(self) -> Router:
        return self._router

    @property
    def routes(self) -> list[RouteEntry]:
        return self._router.routes

    def __len__(self) -> int:
        return len(self._router.routes)


def _check_redirect(entry: RedirectRoute) -> None:
    """Every ``{param}`` in the target must be captured by the source path."""
    captured = {seg.param_name for seg in parse_path(entry.path) if seg.is_param}
    missing = set(_TARGET_PARAM.findall(entry.to)) - captured
    if missing:
        names = ", ".join(sorted(missing))
        msg = f"Redirect {entry.path!r} -> {entry.to!r} uses uncaptured parameter(s): {names}"
        raise ConfigurationError(msg)
    if not entry.to.startswith("/"):
        msg = f"Redirect target {entry.to!r} must be an absolute path."
        raise ConfigurationError(msg)
