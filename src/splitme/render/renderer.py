"""Page renderer: matched view -> markup -> full HTML page."""

import logging
import time

from kida.template import Markup

from splitme.assets import AssetManifest
from splitme.config import AppConfig
from splitme.i18n.store import LocaleStore
from splitme.markup import render_to_string
from splitme.render.context import RequestContext
from splitme.routing.matcher import RenderProps
from splitme.templating.engine import PageTemplate
from splitme.views import ViewProps, root

logger = logging.getLogger("splitme.render")

# Every key of the data object passed to the page template
TEMPLATE_KEYS = frozenset(
    {
        "assets",
        "config",
        "description",
        "is_bot",
        "locale",
        "locale_alternates",
        "locale_iso",
        "markup",
        "title",
    }
)


class Renderer:
    """Render a matched route for a request context.

    Stateless apart from its startup-time collaborators: the same
    context and props always produce the same page.
    """

    __slots__ = ("_assets", "_config", "_store", "_template")

    def __init__(
        self,
        store: LocaleStore,
        template: PageTemplate,
        assets: AssetManifest,
        config: AppConfig,
    ) -> None:
        self._store = store
        self._template = template
        self._assets = assets
        self._config = config

    @staticmethod
    def template_keys() -> frozenset[str]:
        return TEMPLATE_KEYS

    def render(self, context: RequestContext, props: RenderProps) -> str:
        start = time.perf_counter()
        translator = self._store.translator(context.locale)
        view_props = ViewProps(
            locale=context.locale,
            t=translator,
            location=props.location,
            params=props.params,
        )
        rendered = render_to_string(root(props.view, view_props))

        locale_iso: str | None = None
        locale_alternates: tuple[str, ...] = ()
        if context.is_bot:
            locale_iso = self._store.iso(context.locale)
            locale_alternates = tuple(
                self._store.iso(other)
                for other in self._store.available
                if other != context.locale
            )

        html = self._template.render(
            {
                "assets": self._assets,
                "config": self._config,
                "locale": context.locale,
                "markup": Markup(rendered.html),
                "title": rendered.title or self._config.site_name,
                "description": translator.t(self._config.description_key),
                "is_bot": context.is_bot,
                "locale_iso": locale_iso,
                "locale_alternates": locale_alternates,
            }
        )
        logger.debug(
            "renderToString %s %.1fms", props.location.href, (time.perf_counter() - start) * 1000
        )
        return html
