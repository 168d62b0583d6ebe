"""splitme CLI — run the server or inspect the routing table.

Entry point registered as ``splitme`` in ``pyproject.toml``::

    [project.scripts]
    splitme = "splitme.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``splitme`` command."""
    parser = argparse.ArgumentParser(
        prog="splitme",
        description="splitme — server-side rendering for the Split Me web app.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- splitme run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Load locales and start the server")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--production",
        action="store_true",
        help="Serve built assets from the manifest (same as NODE_ENV=production)",
    )
    run_parser.add_argument("--log-level", default=None, help="Logging level (default: info)")

    # -- splitme routes ---------------------------------------------------
    subparsers.add_parser("routes", help="List the routing table")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from splitme.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from splitme.cli._routes import run_routes

        run_routes(args)
