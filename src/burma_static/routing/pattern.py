"""Scan pattern construction.

``build_pattern`` produces a single recursive glob expression, using a
brace alternation group when several extensions are allowed.
``split_pattern`` takes such a pattern apart again into the directory
to walk and the file-name patterns to match; only the file-name part is
brace-expanded, so braces in the directory name are literal.
"""

import re
from collections.abc import Sequence
from pathlib import Path

# Separates the scanned directory from the file-name part
RECURSIVE_SEGMENT = "/**/"

# A whole-name {a,b,...} group inside the file-name part
_BRACE_RE = re.compile(r"^(?P<head>[^{}]*)\{(?P<body>[^{}]*)\}(?P<tail>[^{}]*)$")


def build_pattern(directory: str | Path, extensions: Sequence[str] | None = None) -> str:
    """Build a recursive glob matching files under *directory*.

    Args:
        directory: Directory to scan.
        extensions: Extensions without a leading dot. ``None`` matches
            every file at any depth.

    Returns:
        ``<dir>/**/*``, ``<dir>/**/*.<ext>``, or ``<dir>/**/*.{a,b}``.
    """
    base = Path(directory).as_posix().rstrip("/")
    if not extensions:
        return f"{base}{RECURSIVE_SEGMENT}*"
    if len(extensions) == 1:
        return f"{base}{RECURSIVE_SEGMENT}*.{extensions[0]}"
    return f"{base}{RECURSIVE_SEGMENT}*.{{{','.join(extensions)}}}"


def split_pattern(pattern: str) -> tuple[Path, list[str]]:
    """Split a :func:`build_pattern` result into directory and name patterns.

    ``"/srv/www/**/*.{html,css}"`` becomes
    ``(Path("/srv/www"), ["*.html", "*.css"])``. Duplicate alternatives
    collapse, first occurrence kept.
    """
    directory, sep, names = pattern.rpartition(RECURSIVE_SEGMENT)
    if not sep:
        msg = f"Not a recursive scan pattern: {pattern!r}"
        raise ValueError(msg)
    root = Path(directory or "/")

    match = _BRACE_RE.match(names)
    if match is None or "," not in match["body"]:
        return root, [names]
    alternatives = dict.fromkeys(match["body"].split(","))
    return root, [f"{match['head']}{alt}{match['tail']}" for alt in alternatives]
