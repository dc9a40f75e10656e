"""File collection for route generation.

Walks the scan pattern's directory, drops ignored paths, and keeps
regular files only. Runs synchronously, once, at setup.

The walk never follows symbolic links into directories, and any error
the filesystem raises while listing a directory propagates to the
caller instead of leaving a partial route table.
"""

import logging
import warnings
from collections.abc import Iterable, Iterator
from fnmatch import fnmatchcase
from pathlib import Path

from burma_static.config import StaticConfig
from burma_static.routing.pattern import build_pattern, split_pattern

logger = logging.getLogger("burma_static.routing")


def static_root(config: StaticConfig) -> Path:
    """Absolute static directory: ``static_dir`` against the working directory."""
    return Path.cwd() / config.static_dir


def _raise(error: OSError) -> None:
    raise error


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _walk_files(root: Path) -> Iterator[Path]:
    for directory, dirnames, filenames in root.walk(on_error=_raise):
        # Prune in place so hidden directories are never listed
        dirnames[:] = sorted(name for name in dirnames if not _is_hidden(name))
        for name in sorted(filenames):
            if not _is_hidden(name):
                yield directory / name


def expand_pattern(pattern: str, *, warning: bool = False) -> list[Path]:
    """Expand *pattern* into the files under its directory that match it.

    Symlinked directories are listed but not entered. Hidden (dot)
    entries are skipped. Results are sorted by path string, so
    ``blog.html`` precedes ``blog/index.html``. With ``warning=False``
    any Python warning raised during the scan is suppressed for the
    duration of the scan only.

    Raises:
        OSError: If listing any directory below the root fails.
    """
    root, name_patterns = split_pattern(pattern)
    with warnings.catch_warnings():
        if not warning:
            warnings.simplefilter("ignore")
        matches = [
            path
            for path in _walk_files(root)
            if any(fnmatchcase(path.name, name) for name in name_patterns)
        ]
    return sorted(matches, key=str)


def is_ignored(path: Path, ignores: Iterable[str], *, root: Path | None = None) -> bool:
    """True if any segment of *path* is in *ignores*.

    With *root*, only the segments below the root are checked, so an
    ignored name in the directory that holds the static root does not
    hide the whole tree.
    """
    if root is not None and path.is_relative_to(root):
        path = path.relative_to(root)
    ignore_set = ignores if isinstance(ignores, (set, frozenset)) else set(ignores)
    return not ignore_set.isdisjoint(path.parts)


def is_regular_file(path: Path) -> bool:
    """True for regular files; symlinks never count, even to a regular file."""
    return not path.is_symlink() and path.is_file()


def collect_files(pattern: str, *, ignores: Iterable[str], warning: bool = False) -> list[Path]:
    """Expand *pattern* and keep the regular files no ignore entry touches.

    Ignore entries are matched against the segments below the pattern's
    directory.
    """
    root, _ = split_pattern(pattern)
    ignore_set = frozenset(ignores)
    candidates = expand_pattern(pattern, warning=warning)
    kept = [path for path in candidates if not is_ignored(path, ignore_set, root=root)]
    return [path for path in kept if is_regular_file(path)]


def find_files(config: StaticConfig) -> list[Path]:
    """Collect the servable files for *config*.

    A missing static directory yields an empty list. Errors raised by the
    filesystem while scanning an existing directory propagate.
    """
    root = static_root(config)
    if not root.is_dir():
        logger.debug("Static directory %s does not exist; no routes", root)
        return []
    pattern = build_pattern(root, config.file_ext)
    return collect_files(pattern, ignores=config.ignores, warning=config.warning)
