"""``burma-static routes`` — list generated routes.

Scans a static directory with the given options and prints every route
with its URL, MIME type, and file.
"""

import argparse
import sys
from pathlib import Path

from burma_static.config import StaticConfig
from burma_static.errors import ConfigurationError
from burma_static.routing.collector import static_root
from burma_static.routing.table import generate_routes


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of URL, MIME, and FILE for the scanned directory."""
    try:
        config = StaticConfig(
            root_path=args.root_path,
            static_dir=args.static_dir,
            file_ext=tuple(args.file_ext) if args.file_ext else None,
            ignore=tuple(args.ignore),
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    root = static_root(config)
    if not root.is_dir():
        print(f"Error: static directory not found: {root}", file=sys.stderr)
        raise SystemExit(1)

    table = generate_routes(config)
    if not table:
        print("No routes found.")
        return

    # Build rows: (url, mime, file relative to the static root)
    rows: list[tuple[str, str, str]] = [
        (route.url, route.mime or "-", _display_path(route.file, root)) for route in table
    ]

    # Column widths
    max_url = max(max(len(r[0]) for r in rows), 3)  # "URL" header
    max_mime = max(max(len(r[1]) for r in rows), 4)  # "MIME" header

    # Print table
    fmt = f"{{:<{max_url}}}  {{:<{max_mime}}}  {{}}"
    print(fmt.format("URL", "MIME", "FILE"))
    sep_len = max_url + max_mime + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for url, mime, file in rows:
        print(fmt.format(url, mime, file))

    for url in table.duplicates():
        print(f"warning: multiple files map to {url}", file=sys.stderr)


def _display_path(file: Path, root: Path) -> str:
    try:
        return file.relative_to(root.absolute()).as_posix()
    except ValueError:
        return str(file)
