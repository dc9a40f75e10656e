"""Route-generation and serving configuration.

StaticConfig is a frozen dataclass — immutable after creation, validated
at construction, no string-key dict lookups.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from burma_static.errors import ConfigurationError

# Build and metadata artifacts that are never served.
DEFAULT_IGNORES: frozenset[str] = frozenset(
    {
        "node_modules",
        "tsconfig.json",
        "README.md",
        "package.json",
        "package-lock.json",
        "LICENSE",
    }
)


@dataclass(frozen=True, slots=True)
class StaticConfig:
    """Static route configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = StaticConfig(static_dir="public", file_ext=("html", "css"))

    ``ignore`` extends :data:`DEFAULT_IGNORES`; it can never remove a
    default entry.
    """

    # Routing
    root_path: str = "/"
    static_dir: str | Path = "."
    file_ext: tuple[str, ...] | None = None  # None = every file
    ignore: tuple[str, ...] = ()

    # Scan
    warning: bool = False  # keep filesystem warnings visible during the scan

    # Serving
    send_content_type: bool = False  # off: status code only, no Content-Type
    access_log: bool = True

    def __post_init__(self) -> None:
        root = self.root_path or "/"
        if not root.startswith("/"):
            root = "/" + root
        object.__setattr__(self, "root_path", root)

        if self.file_ext is not None:
            object.__setattr__(self, "file_ext", _normalize_extensions(self.file_ext))
        ignore = (self.ignore,) if isinstance(self.ignore, str) else tuple(self.ignore)
        object.__setattr__(self, "ignore", ignore)

    @property
    def ignores(self) -> frozenset[str]:
        """Effective ignore set: the defaults unioned with ``ignore``."""
        return DEFAULT_IGNORES | frozenset(self.ignore)

    @classmethod
    def from_options(cls, **options: Any) -> "StaticConfig":
        """Build a config from keyword options, rejecting unknown names."""
        _check_option_names(options)
        return cls(**options)

    def with_options(self, **options: Any) -> "StaticConfig":
        """Return a copy with *options* overriding fields."""
        _check_option_names(options)
        return replace(self, **options)


def _check_option_names(options: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(StaticConfig)}
    unknown = sorted(set(options) - known)
    if unknown:
        msg = f"Unknown static option(s): {', '.join(unknown)}"
        raise ConfigurationError(msg)


def _normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    if isinstance(extensions, str):
        extensions = (extensions,)
    normalized = tuple(ext.removeprefix(".") for ext in extensions)
    if not normalized:
        msg = "file_ext must list at least one extension, or be None to match every file"
        raise ConfigurationError(msg)
    if any(not ext for ext in normalized):
        msg = f"file_ext contains an empty extension: {normalized!r}"
        raise ConfigurationError(msg)
    return normalized
