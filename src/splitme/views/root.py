"""Root component: title default, shell, matched page."""

from collections.abc import Callable

from splitme.markup import Node, title
from splitme.views.layout import main
from splitme.views.props import ViewProps


def root(view: Callable[[ViewProps], Node], props: ViewProps) -> Node:
    return title(props.t("product.title"), main(props, view(props)))
