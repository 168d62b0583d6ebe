"""Production entry point: load locales, then bind a pounce server.

Locales and the page template are made ready before the listener is
bound. If that fails the process exits without ever accepting a
connection. Once serving, every way out is a termination and exits
with status 1.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anyio

from splitme.errors import ConfigurationError, LocaleLoadError
from splitme.server.lifecycle import install_signal_handlers

if TYPE_CHECKING:
    from splitme.app import App

logger = logging.getLogger("splitme.server")


def serve(app: App, host: str | None = None, port: int | None = None) -> None:
    """Start *app* on one event loop in one worker.

    Args:
        app: The splitme App.
        host: Override ``app.config.host``.
        port: Override ``app.config.port``.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    install_signal_handlers()

    try:
        anyio.run(app.startup)
    except (LocaleLoadError, ConfigurationError) as exc:
        logger.critical("Startup failed: %s", exc)
        raise SystemExit(1) from exc

    _host = host or app.config.host
    _port = port or app.config.port

    config = ServerConfig(
        host=_host,
        port=_port,
        workers=1,
        log_level=app.config.log_level,
    )
    app.handle_signals = True
    logger.info("splitme server starting on %s:%d", _host, _port)
    Server(config, app).run()

    # The worker only returns after its own signal handling drained it
    logger.warning("splitme server shut down by the server's signal handling")
    raise SystemExit(1)
