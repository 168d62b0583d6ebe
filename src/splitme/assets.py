"""Asset manifest — where the browser bundle and stylesheet are served from.

Production reads the build's ``assets.json`` once; development points
at the bundler's dev server. Either way the result is selected once at
startup and never changes.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from splitme.config import AppConfig
from splitme.errors import ConfigurationError

logger = logging.getLogger("splitme.server")


@dataclass(frozen=True, slots=True)
class AssetManifest:
    js: str
    css: str | None = None


def load_manifest(path: str | Path) -> AssetManifest:
    """Read a built manifest of the form ``{"main": {"js": ..., "css": ...}}``.

    Raises ``ConfigurationError`` if the file is missing, is not JSON, or
    has no ``main.js`` entry.
    """
    target = Path(path)
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except OSError as exc:
        msg = f"Cannot read asset manifest {target}: {exc.strerror or exc}"
        raise ConfigurationError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Asset manifest {target} is not valid JSON: {exc}"
        raise ConfigurationError(msg) from exc

    main = data.get("main") if isinstance(data, dict) else None
    if not isinstance(main, dict) or not isinstance(main.get("js"), str):
        msg = f"Asset manifest {target} has no 'main.js' entry"
        raise ConfigurationError(msg)

    css = main.get("css")
    return AssetManifest(js=main["js"], css=css if isinstance(css, str) else None)


def dev_manifest(bundle_url: str) -> AssetManifest:
    """Development: the bundle comes from the dev server, styles are inlined by it."""
    return AssetManifest(js=bundle_url)


def select_manifest(config: AppConfig) -> AssetManifest:
    if config.production:
        manifest = load_manifest(config.asset_manifest)
        logger.info("Using built assets from %s", config.asset_manifest)
        return manifest
    return dev_manifest(config.dev_bundle_url)
