"""Serialize a markup tree to an HTML string.

Serialization is the only place a document title is collected: ``Title``
nodes act as a side-channel written while the tree is walked and read
back ("rewound") once the walk is done.
"""

from dataclasses import dataclass
from html import escape
from typing import Any

from splitme.markup.nodes import Element, Fragment, Node, Raw, Title

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

_PROP_ALIASES = {"class_name": "class", "html_for": "for"}


@dataclass(frozen=True, slots=True)
class Rendered:
    """Serialized markup plus the title collected while serializing."""

    html: str
    title: str | None


def render_to_string(node: Node) -> Rendered:
    """Serialize *node* and rewind the title side-channel."""
    buf: list[str] = []
    titles: list[str] = []
    _render(node, buf, titles)
    return Rendered(html="".join(buf), title=titles[-1] if titles else None)


def _render(node: Node, buf: list[str], titles: list[str]) -> None:
    if node is None:
        return
    if isinstance(node, str):
        buf.append(escape(node, quote=False))
    elif isinstance(node, bool):
        return
    elif isinstance(node, int):
        buf.append(str(node))
    elif isinstance(node, Raw):
        buf.append(node.html)
    elif isinstance(node, Title):
        titles.append(node.text)
        for child in node.children:
            _render(child, buf, titles)
    elif isinstance(node, Fragment):
        for child in node.children:
            _render(child, buf, titles)
    elif isinstance(node, Element):
        buf.append(f"<{node.tag}{_attributes(node.props)}>")
        if node.tag in VOID_ELEMENTS:
            if node.children:
                msg = f"<{node.tag}> is a void element and cannot have children"
                raise ValueError(msg)
            return
        for child in node.children:
            _render(child, buf, titles)
        buf.append(f"</{node.tag}>")
    else:
        msg = f"Cannot render {type(node).__name__!r} as markup"
        raise TypeError(msg)


def attribute_name(prop: str) -> str:
    """``class_name`` -> ``class``, ``data_id`` -> ``data-id``."""
    if prop in _PROP_ALIASES:
        return _PROP_ALIASES[prop]
    if prop.startswith(("data_", "aria_")):
        return prop.replace("_", "-")
    return prop


def _attributes(props: dict[str, Any] | Any) -> str:
    parts: list[str] = []
    for prop, value in props.items():
        if value is None or value is False:
            continue
        name = attribute_name(prop)
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(parts)
