"""Page views. Each view is a pure function ``ViewProps -> Node``."""

from splitme.views.props import ViewProps
from splitme.views.root import root

__all__ = ["ViewProps", "root"]
