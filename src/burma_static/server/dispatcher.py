"""ASGI request dispatcher for generated static routes.

The only component that touches raw ASGI scopes. Matches the request
target against the route table and serves through the content cache,
falling back to a disk read that populates the cache.

Per request::

    find(request.url) ── no match ──▶ 404 document
          │
          ▼
    cache.get(url) ── hit ──▶ cached bytes            (logged "from cache")
          │
          ▼ miss
    read file → cache.set(url) → stream file from disk
"""

import logging
from typing import Any

import anyio

from burma_static._internal.asgi import Receive, Scope, Send
from burma_static.cache import ContentCache
from burma_static.config import StaticConfig
from burma_static.http.request import Request
from burma_static.routing.mime import MimeLookup
from burma_static.routing.route import Route
from burma_static.routing.table import RouteTable, generate_routes
from burma_static.server.sender import send_content, send_file, send_not_found

logger = logging.getLogger("burma_static.server")
access_logger = logging.getLogger("burma_static.access")


class StaticApp:
    """ASGI application serving a fixed :class:`RouteTable`.

    The route table is read-only and the cache is append-only; no other
    state survives a request. Concurrent first requests for one URL may
    both read the file and both populate the cache.

    Usage::

        app = StaticApp(generate_routes(static_dir="public"))

        # or, equivalently
        app = burma_static(static_dir="public")
    """

    __slots__ = ("_cache", "_config", "_routes")

    def __init__(
        self,
        routes: RouteTable,
        cache: ContentCache | None = None,
        *,
        config: StaticConfig | None = None,
    ) -> None:
        self._routes = routes
        self._cache = cache if cache is not None else ContentCache()
        self._config = config or StaticConfig()

    @property
    def routes(self) -> RouteTable:
        return self._routes

    @property
    def cache(self) -> ContentCache:
        return self._cache

    @property
    def config(self) -> StaticConfig:
        return self._config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await _handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return
        await self.dispatch(Request.from_asgi(scope), send)

    async def dispatch(self, request: Request, send: Send) -> None:
        """Serve one request.

        Errors reading a matched file propagate; there is no fallback
        response.
        """
        route = self._routes.find(request.url)
        if route is None:
            logger.debug("404 %s %s", request.method, request.url)
            await send_not_found(send)
            return

        content_type = self._content_type(route)
        cached = self._cache.get(route.url)
        if cached is not None:
            await send_content(cached, send, content_type=content_type)
            self._log_access(request, 200, from_cache=True)
            return

        content = await anyio.Path(route.file).read_bytes()
        self._cache.set(route.url, content)
        await send_file(route.file, send, content_type=content_type)
        self._log_access(request, 200)

    def _content_type(self, route: Route) -> str | None:
        if not self._config.send_content_type:
            return None
        return route.mime or None

    def _log_access(self, request: Request, status: int, *, from_cache: bool = False) -> None:
        if not self._config.access_log:
            return
        if from_cache:
            access_logger.info("%s %s %d (from cache)", request.method, request.url, status)
        else:
            access_logger.info("%s %s %d", request.method, request.url, status)


async def _handle_lifespan(receive: Receive, send: Send) -> None:
    """Acknowledge lifespan events; there is nothing to start or stop."""
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return


def burma_static(
    config: StaticConfig | None = None,
    *,
    cache: ContentCache | None = None,
    resolver: MimeLookup | None = None,
    **options: Any,
) -> StaticApp:
    """Generate routes once and return the ASGI handler serving them.

    Args:
        config: Full configuration; keyword *options* override its fields
            or build one when it is omitted (``root_path``, ``static_dir``,
            ``file_ext``, ``ignore``, ``warning``, ...).
        cache: Content cache to serve through. A new, empty cache is
            created when omitted.
        resolver: MIME lookup collaborator for route generation.

    Raises:
        ConfigurationError: If the options are invalid.
        OSError: If scanning the static directory fails.
    """
    if config is None:
        config = StaticConfig.from_options(**options)
    elif options:
        config = config.with_options(**options)
    routes = generate_routes(config, resolver=resolver)
    return StaticApp(routes, cache, config=config)