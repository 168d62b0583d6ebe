"""splitme application.

Wires the render pipeline into an ASGI callable: static roots first,
then the catch-all route that matches the URL, renders the page (through
the render cache) and answers with HTML, a redirect, an error or 404.

Nothing is served until ``startup()`` has loaded every locale, selected
the asset manifest and checked the page template.
"""

import logging

from splitme.server.asgi import Receive, Scope, Send
from splitme.assets import select_manifest
from splitme.config import AppConfig
from splitme.http.request import Request
from splitme.http.response import Response, redirect_response, text_response
from splitme.i18n.store import LocaleStore
from splitme.middleware.protocol import Middleware
from splitme.middleware.static import ONE_YEAR, StaticFiles
from splitme.render.cache import RenderCache
from splitme.render.context import RequestContext, is_bot_user_agent
from splitme.render.renderer import Renderer
from splitme.routing.matcher import MatchError, RedirectTo, RenderProps, match
from splitme.routing.table import RoutingTable
from splitme.server.handler import handle_request
from splitme.server.lifecycle import attach_to_running_loop
from splitme.templating.engine import PageTemplate

logger = logging.getLogger("splitme.server")


class App:
    """The splitme server application.

    Usage::

        app = App(AppConfig.from_env())
        serve(app)

    Collaborators can be injected for tests; everything left out is
    built from *config*.
    """

    __slots__ = (
        "_cache",
        "_middleware",
        "_renderer",
        "_routes",
        "_store",
        "config",
        "handle_signals",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        routes: RoutingTable | None = None,
        *,
        store: LocaleStore | None = None,
        cache: RenderCache | None = None,
        middleware: tuple[Middleware, ...] | None = None,
        handle_signals: bool = False,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        if routes is None:
            from splitme.routes import ROUTES

            routes = ROUTES
        self._routes = routes
        self._store = store or LocaleStore(
            self.config.locales_dir,
            supported=self.config.locales,
            default=self.config.default_locale,
        )
        self._cache = cache if cache is not None else RenderCache(self.config.render_cache_size)
        if middleware is None:
            middleware = (
                StaticFiles(self.config.public_dir, cache_control="no-cache"),
                StaticFiles(
                    self.config.static_dir,
                    cache_control=f"public, max-age={ONE_YEAR}",
                    index=None,
                ),
            )
        self._middleware: tuple[Middleware, ...] = middleware
        self._renderer: Renderer | None = None
        # Set by serve(): claim SIGINT/SIGTERM on the server loop at lifespan startup
        self.handle_signals = handle_signals

    # -- Collaborators --

    @property
    def routes(self) -> RoutingTable:
        return self._routes

    @property
    def store(self) -> LocaleStore:
        return self._store

    @property
    def cache(self) -> RenderCache:
        return self._cache

    @property
    def ready(self) -> bool:
        return self._renderer is not None

    # -- Startup --

    async def startup(self) -> None:
        """Load locales, pick assets, compile and check the page template.

        Idempotent. Any failure propagates: the caller must not start
        serving traffic.
        """
        if self._renderer is not None:
            return

        await self._store.load_all()
        assets = select_manifest(self.config)
        template = PageTemplate.from_path(self.config.template_path)
        template.check(Renderer.template_keys())

        self._renderer = Renderer(self._store, template, assets, self.config)
        logger.info(
            "splitme ready: locales=%s production=%s",
            ",".join(self._store.available),
            self.config.production,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            dispatch=self._dispatch,
            middleware=self._middleware,
            debug=not self.config.production,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.critical("Startup failed: %s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                if self.handle_signals:
                    attach_to_running_loop()
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Catch-all route --

    async def _dispatch(self, request: Request) -> Response:
        if request.method not in ("GET", "HEAD"):
            return text_response("Not found", 404)

        if self._renderer is None:
            logger.warning("Request for %s before startup completed", request.url)
            return text_response("Service Unavailable", 503)

        outcome = match(self._routes, request.url)

        if isinstance(outcome, MatchError):
            logger.warning("Route matching failed for %s: %s", request.url, outcome.message)
            return text_response(outcome.message, 500)
        if isinstance(outcome, RedirectTo):
            return redirect_response(outcome.location)
        if isinstance(outcome, RenderProps):
            return self._render(request, outcome)
        return text_response("Not found", 404)

    def _render(self, request: Request, props: RenderProps) -> Response:
        renderer = self._renderer
        assert renderer is not None

        context = RequestContext(
            locale=self._store.resolve_best_locale(request),
            is_bot=is_bot_user_agent(request.user_agent, self.config.bot_user_agents),
            url=request.url,
        )
        html = self._cache.get_or_compute(
            context.cache_key(props.location),
            lambda: renderer.render(context, props),
        )
        logger.info("%s %s %s", request.url, context.locale, request.user_agent)
        return Response(body=html)

