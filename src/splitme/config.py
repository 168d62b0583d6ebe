"""Server configuration.

AppConfig is a frozen dataclass: selected once at startup from the
environment and passed to everything that needs it. Nothing reads
``os.environ`` after this point.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from splitme.errors import ConfigurationError

logger = logging.getLogger("splitme.config")

DEFAULT_HOST = "127.0.0.1"
PORT_DEV_BUNDLER = 8000
PORT_DEV_SERVER = 8080


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Server configuration. Immutable after creation.

    All fields have defaults suited to local development::

        config = AppConfig(production=True, port=3000)
    """

    # Server
    host: str = DEFAULT_HOST
    port: int = PORT_DEV_SERVER
    production: bool = False

    # Static roots (public: always revalidate, static: hashed build output)
    public_dir: str | Path = "server/public"
    static_dir: str | Path = "server/static"

    # Assets
    asset_manifest: str | Path = "server/static/assets.json"
    dev_bundle_url: str = f"http://local.splitme.net:{PORT_DEV_BUNDLER}/browser.js"

    # Page template (None = the packaged index.html)
    template_path: str | Path | None = None

    # Localization
    locales_dir: str | Path | None = None  # None = packaged translations
    locales: tuple[str, ...] = ("en", "fr")
    default_locale: str = "en"
    description_key: str = "product.description.long"

    # Crawlers that get locale-alternate metadata
    bot_user_agents: tuple[str, ...] = ("facebookexternalhit",)

    site_name: str = "Split Me"

    # Rendered pages kept in memory (None = no bound)
    render_cache_size: int | None = 1024

    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "AppConfig":
        """Build a config from ``NODE_ENV`` and the OpenShift bind variables.

        Keyword *overrides* win over anything read from the environment.
        """
        env = os.environ if environ is None else environ

        host = env.get("OPENSHIFT_NODEJS_IP")
        if host is None:
            logger.warning("No OPENSHIFT_NODEJS_IP var, using %s", DEFAULT_HOST)
            host = DEFAULT_HOST

        raw_port = env.get("OPENSHIFT_NODEJS_PORT")
        if raw_port is None or raw_port == "":
            port = PORT_DEV_SERVER
        else:
            try:
                port = int(raw_port)
            except ValueError:
                msg = f"OPENSHIFT_NODEJS_PORT must be an integer, got {raw_port!r}"
                raise ConfigurationError(msg) from None

        values: dict[str, object] = {
            "host": host,
            "port": port,
            "production": env.get("NODE_ENV") == "production",
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]
