"""burma-static exception hierarchy.

Shared across route generation, the dispatcher, and the CLI so every
module raises and catches the same types.

Filesystem failures are deliberately not part of this hierarchy:
``OSError`` raised while scanning the static directory reaches the
caller of ``generate_routes()``, and ``OSError`` raised while reading a
file during a request leaves the ASGI call unhandled.
"""


class StaticError(Exception):
    """Base for all burma-static errors."""


class ConfigurationError(StaticError):
    """Raised when a ``StaticConfig`` is invalid.

    Raised eagerly at construction, before any directory is scanned.
    """
