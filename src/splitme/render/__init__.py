"""Render pipeline — request context, memoized page rendering."""

from splitme.render.cache import RenderCache
from splitme.render.context import RequestContext, is_bot_user_agent
from splitme.render.renderer import TEMPLATE_KEYS, Renderer

__all__ = [
    "TEMPLATE_KEYS",
    "RenderCache",
    "Renderer",
    "RequestContext",
    "is_bot_user_agent",
]
