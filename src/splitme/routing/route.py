"""Route table entries and the location they match against."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/accounts``      (is_param=False)
    Param:   ``/{id}``          (is_param=True, param_name="id")
    Typed:   ``/{id:int}``      (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class ViewRoute:
    """Mount *view* when the path matches.

    *view* is a pure function from view props to a markup node.
    """

    path: str
    view: Callable[..., Any]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RedirectRoute:
    """Send the client from *path* to *to*.

    Parameters captured by *path* may be reused in *to*, e.g.
    ``RedirectRoute("/account/{id}", "/account/{id}/expenses")``.
    """

    path: str
    to: str


type RouteEntry = ViewRoute | RedirectRoute


@dataclass(frozen=True, slots=True)
class Location:
    """The part of a URL the router looked at."""

    pathname: str
    search: str = ""

    @property
    def href(self) -> str:
        if self.search:
            return f"{self.pathname}?{self.search}"
        return self.pathname


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful trie lookup, before parameter conversion."""

    route: RouteEntry
    path_params: dict[str, str]
