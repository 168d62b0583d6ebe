"""splitme — server-side rendering for the Split Me web app.

Matches the URL against a static routing table, renders the matched
view to HTML for the best locale, injects it into a minified page
template and memoizes the result.

Basic usage::

    from splitme import App, AppConfig
    from splitme.server.run import serve

    serve(App(AppConfig.from_env()))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "LocaleLoadError",
    "LocaleStore",
    "RenderCache",
    "Request",
    "Response",
    "RoutingTable",
    "SplitmeError",
    "match",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import splitme`` fast while providing a clean top-level API.
    """
    if name == "App":
        from splitme.app import App

        return App

    if name == "AppConfig":
        from splitme.config import AppConfig

        return AppConfig

    if name in ("Request", "Response"):
        from splitme.http import request as _req
        from splitme.http import response as _resp

        return getattr(_req if name == "Request" else _resp, name)

    if name == "LocaleStore":
        from splitme.i18n.store import LocaleStore

        return LocaleStore

    if name == "RenderCache":
        from splitme.render.cache import RenderCache

        return RenderCache

    if name in ("RoutingTable", "match"):
        from splitme import routing as _routing

        return getattr(_routing, name)

    if name in ("ConfigurationError", "LocaleLoadError", "SplitmeError"):
        from splitme import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
