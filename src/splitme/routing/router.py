"""Trie-based path matching over the route table.

Routes are added while the table is built and compiled into an
immutable lookup structure; matching is O(path depth).
"""

import re
from dataclasses import dataclass

from splitme.errors import ConfigurationError, NotFound
from splitme.routing.params import CONVERTERS
from splitme.routing.route import PathSegment, RouteEntry, RouteMatch


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/accounts"              -> [PathSegment("accounts")]
        "/account/{id}"          -> [PathSegment("account"), PathSegment("{id}", is_param=True, ...)]
        "/account/{id:int}"      -> [..., PathSegment("{id:int}", is_param=True, param_type="int")]
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = f"Route {path!r} uses <param> syntax; write {{param}} instead."
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if param_type not in CONVERTERS:
                msg = f"Route {path!r} uses unknown converter {param_type!r}."
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_all", "children", "param_child", "route")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        # Only one param pattern per level
        self.param_child: _ParamEdge | None = None
        self.catch_all: _CatchAllEdge | None = None
        self.route: RouteEntry | None = None


@dataclass(slots=True)
class _ParamEdge:
    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


@dataclass(slots=True)
class _CatchAllEdge:
    """Consumes the remaining path."""

    param_name: str
    route: RouteEntry


class Router:
    """Compiled route trie.

    Usage::

        router = Router()
        router.add(ViewRoute("/accounts", account_list))
        router.compile()
        match = router.match("/accounts")
    """

    __slots__ = ("_compiled", "_root", "_routes")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False
        self._routes: list[RouteEntry] = []

    def add(self, route: RouteEntry) -> None:
        """Add a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for seg in parse_path(route.path):
            if seg.is_param and seg.param_type == "path":
                if node.catch_all is not None:
                    self._duplicate(route)
                node.catch_all = _CatchAllEdge(param_name=seg.param_name or "path", route=route)
                self._routes.append(route)
                return

            if seg.is_param:
                if node.param_child is None:
                    pattern = CONVERTERS[seg.param_type].pattern
                    node.param_child = _ParamEdge(
                        param_name=seg.param_name or "",
                        param_type=seg.param_type,
                        regex=re.compile(f"^{pattern}$"),
                        node=_TrieNode(),
                    )
                elif (
                    node.param_child.param_name != seg.param_name
                    or node.param_child.param_type != seg.param_type
                ):
                    msg = (
                        f"Route {route.path!r} declares {seg.value} where another route "
                        f"already declared {{{node.param_child.param_name}:"
                        f"{node.param_child.param_type}}}."
                    )
                    raise ConfigurationError(msg)
                node = node.param_child.node
            else:
                node = node.children.setdefault(seg.value, _TrieNode())

        if node.route is not None:
            self._duplicate(route)
        node.route = route
        self._routes.append(route)

    @staticmethod
    def _duplicate(route: RouteEntry) -> None:
        msg = f"Duplicate route path {route.path!r}."
        raise ConfigurationError(msg)

    @property
    def routes(self) -> list[RouteEntry]:
        """All registered routes, in registration order."""
        return list(self._routes)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, parts: list[str]) -> RouteMatch:
        """Match decoded path segments against the trie.

        Raises ``NotFound`` if no route matches.
        """
        result = self._match_node(self._root, parts, 0, {})
        if result is None:
            raise NotFound(f"No route matches {'/' + '/'.join(parts)!r}")
        route, params = result
        return RouteMatch(route=route, path_params=params)

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[RouteEntry, dict[str, str]] | None:
        if index == len(parts):
            if node.route is not None:
                return node.route, params
            return None

        part = parts[index]

        # Static children win over parameters, parameters over catch-all
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        if node.param_child is not None:
            edge = node.param_child
            if edge.regex.match(part):
                result = self._match_node(
                    edge.node, parts, index + 1, {**params, edge.param_name: part}
                )
                if result is not None:
                    return result

        if node.catch_all is not None:
            remaining = "/".join(parts[index:])
            return node.catch_all.route, {**params, node.catch_all.param_name: remaining}

        return None
