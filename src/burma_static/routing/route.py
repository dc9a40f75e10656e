"""Route and RouteKind."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RouteKind(Enum):
    """Placement (static root vs. subdirectory) crossed with file kind."""

    ROOT_INDEX = "root-index"
    NESTED_INDEX = "nested-index"
    ROOT_HTML = "root-html"
    NESTED_HTML = "nested-html"
    ROOT_ASSET = "root-asset"
    NESTED_ASSET = "nested-asset"


@dataclass(frozen=True, slots=True)
class Route:
    """One discovered file published under one URL.

    ``file`` is absolute; the dispatcher reads it on a cache miss.
    """

    file: Path
    url: str
    mime: str
    mime_category: str
    base: str
    kind: RouteKind
