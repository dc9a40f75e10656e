"""burma-static — serve a directory tree as exact-match ASGI routes.

Files under a static directory are discovered once and published under
canonical URLs (``index.html`` → its directory, ``about.html`` →
``/about``, assets keep their name). Content is cached in memory after
the first read.

Basic usage::

    from burma_static import burma_static

    app = burma_static(static_dir="public", root_path="/")

``app`` is an ASGI application; run it under any ASGI server.
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_IGNORES",
    "ConfigurationError",
    "ContentCache",
    "Route",
    "RouteKind",
    "RouteTable",
    "StaticApp",
    "StaticConfig",
    "StaticError",
    "burma_static",
    "generate_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import burma_static`` free of anyio until serving is needed.
    """
    if name in ("StaticApp", "burma_static"):
        from burma_static.server import dispatcher as _dispatcher

        return getattr(_dispatcher, name)

    if name in ("StaticConfig", "DEFAULT_IGNORES"):
        from burma_static import config as _config

        return getattr(_config, name)

    if name == "ContentCache":
        from burma_static.cache import ContentCache

        return ContentCache

    if name in ("Route", "RouteKind", "RouteTable", "generate_routes"):
        from burma_static import routing as _routing

        return getattr(_routing, name)

    if name in ("StaticError", "ConfigurationError"):
        from burma_static import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
