"""RouteTable and route generation.

``generate_routes`` runs the whole setup pipeline once:
pattern → file collection → URL mapping → frozen table.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import Any

from burma_static.config import StaticConfig
from burma_static.routing.collector import find_files, static_root
from burma_static.routing.mapper import map_route
from burma_static.routing.mime import MimeLookup, MimeResolver, lookup_mime
from burma_static.routing.route import Route

logger = logging.getLogger("burma_static.routing")


class RouteTable:
    """Immutable, ordered collection of routes.

    Lookup goes through a URL index. When several files map to the same
    URL every route stays in ``routes``, but ``find`` returns the first
    one in table order.
    """

    __slots__ = ("_index", "_routes")

    def __init__(self, routes: Iterable[Route] = ()) -> None:
        self._routes: tuple[Route, ...] = tuple(routes)
        index: dict[str, Route] = {}
        for route in self._routes:
            index.setdefault(route.url, route)
        self._index = index

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    @property
    def urls(self) -> tuple[str, ...]:
        """Distinct URLs, in first-seen order."""
        return tuple(self._index)

    def find(self, url: str) -> Route | None:
        """Exact-match lookup (case-sensitive, no normalization)."""
        return self._index.get(url)

    def duplicates(self) -> list[str]:
        """URLs claimed by more than one file."""
        counts = Counter(route.url for route in self._routes)
        return [url for url, count in counts.items() if count > 1]

    def __contains__(self, url: object) -> bool:
        return url in self._index

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({len(self._routes)} routes)"


def generate_routes(
    config: StaticConfig | None = None,
    *,
    resolver: MimeLookup | None = None,
    **options: Any,
) -> RouteTable:
    """Scan the static directory and build its route table.

    Args:
        config: Full configuration. Keyword *options* override its
            fields, or build a fresh config when *config* is omitted.
        resolver: MIME lookup collaborator; defaults to
            :func:`~burma_static.routing.mime.lookup_mime`. It is
            memoized per extension for this run only.

    Returns:
        One route per collected file, in sorted path order.

    Raises:
        ConfigurationError: If the options are invalid.
        OSError: If the filesystem scan fails.
    """
    if config is None:
        config = StaticConfig.from_options(**options)
    elif options:
        config = config.with_options(**options)

    root = static_root(config)
    mime = MimeResolver(resolver or lookup_mime)
    table = RouteTable(
        map_route(file, static_root=root, root_path=config.root_path, resolver=mime)
        for file in find_files(config)
    )

    logger.debug("Generated %d static routes from %s", len(table), root)
    for url in table.duplicates():
        logger.warning("Multiple files map to %s; the first one is served", url)
    return table
