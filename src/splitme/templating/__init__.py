"""Page template — minified once at startup, interpolated per request."""

from splitme.templating.engine import PageTemplate, interpolate, template_placeholders
from splitme.templating.minify import minify_html

__all__ = ["PageTemplate", "interpolate", "minify_html", "template_placeholders"]
