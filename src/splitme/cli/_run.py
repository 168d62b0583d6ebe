"""``splitme run`` — configure from the environment and serve."""

import argparse
import logging
import sys

from splitme.config import AppConfig
from splitme.errors import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_config(args: argparse.Namespace) -> AppConfig:
    """Environment first, CLI flags on top."""
    overrides: dict[str, object] = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.production:
        overrides["production"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level
    return AppConfig.from_env(**overrides)


def run_server(args: argparse.Namespace) -> None:
    logging.basicConfig(
        level=(args.log_level or "info").upper(),
        format=LOG_FORMAT,
    )
    try:
        config = build_config(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from splitme.app import App
    from splitme.server.run import serve

    serve(App(config))
