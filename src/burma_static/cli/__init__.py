"""burma-static CLI — inspect the routes generated for a directory.

Entry point registered as ``burma-static`` in ``pyproject.toml``::

    [project.scripts]
    burma-static = "burma_static.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``burma-static`` command."""
    parser = argparse.ArgumentParser(
        prog="burma-static",
        description="burma-static — serve a directory tree as static ASGI routes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- burma-static routes -----------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes generated for a directory")
    routes_parser.add_argument("--static-dir", default=".", help="Directory to scan (default: .)")
    routes_parser.add_argument("--root-path", default="/", help="URL prefix for every route (default: /)")
    routes_parser.add_argument(
        "--ext",
        action="append",
        dest="file_ext",
        default=None,
        metavar="EXT",
        help="Only include files with this extension (repeatable)",
    )
    routes_parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Extra path segment to ignore (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from burma_static.cli._routes import run_routes

        run_routes(args)
