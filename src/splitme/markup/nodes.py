"""Markup node types."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Element:
    """An HTML element with props and children."""

    tag: str
    props: Mapping[str, Any] = field(default_factory=dict)
    children: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class Fragment:
    """Children rendered without a wrapping element."""

    children: tuple["Node", ...] = ()


@dataclass(frozen=True, slots=True)
class Raw:
    """Trusted HTML, emitted verbatim."""

    html: str


@dataclass(frozen=True, slots=True)
class Title:
    """Sets the document title while rendering its children.

    Nested titles override outer ones; the last one visited wins.
    """

    text: str
    children: tuple["Node", ...] = ()


type Node = Element | Fragment | Raw | Title | str | int | None


def _flatten(children: Iterable[Any]) -> tuple[Node, ...]:
    out: list[Node] = []
    for child in children:
        if isinstance(child, (list, tuple)):
            out.extend(_flatten(child))
        elif child is not None and child is not False:
            out.append(child)
    return tuple(out)


def h(tag: str, props: Mapping[str, Any] | None = None, *children: Any) -> Element:
    """Build an element. Lists and tuples among *children* are flattened;
    ``None`` and ``False`` children are dropped.
    """
    return Element(tag=tag, props=dict(props or {}), children=_flatten(children))


def fragment(*children: Any) -> Fragment:
    return Fragment(children=_flatten(children))


def title(text: str, *children: Any) -> Title:
    return Title(text=text, children=_flatten(children))
