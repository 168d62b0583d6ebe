"""Markup trees — pure data built by view functions, serialized to HTML.

Views are plain functions from props to a node::

    def greeting(props):
        return h("p", {"class_name": "greeting"}, "Hello ", props["name"])

    render_to_string(greeting({"name": "Ada"})).html
    # '<p class="greeting">Hello Ada</p>'
"""

from splitme.markup.nodes import Element, Fragment, Node, Raw, Title, fragment, h, title
from splitme.markup.serialize import Rendered, render_to_string

__all__ = [
    "Element",
    "Fragment",
    "Node",
    "Raw",
    "Rendered",
    "Title",
    "fragment",
    "h",
    "render_to_string",
    "title",
]
