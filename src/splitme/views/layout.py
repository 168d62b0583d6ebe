"""Application shell: the matched page plus the global overlay mount points."""

from splitme.markup import Node, h
from splitme.views.props import ViewProps


def modal(props: ViewProps) -> Node:
    return h("div", {"id": "modal", "class_name": "modal", "aria_hidden": "true"})


def snackbar(props: ViewProps) -> Node:
    return h("div", {"id": "snackbar", "class_name": "snackbar", "role": "status"})


def main(props: ViewProps, page: Node) -> Node:
    return h(
        "div",
        {"class_name": "main", "data_locale": props.locale},
        page,
        modal(props),
        snackbar(props),
    )
