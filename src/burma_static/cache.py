"""Read-through content cache.

Maps a route URL to the raw bytes of its file. Entries are created on
the first cache-miss serve and never updated or removed afterwards: a
file changed on disk keeps serving its first-read content for the
lifetime of the cache.

One cache belongs to one ``StaticApp``. There is no lock; two
concurrent misses for the same URL both write, and the last write wins.
Both writes hold the same file content.
"""

from collections.abc import Iterator


class ContentCache:
    """Unbounded, append-only ``url -> bytes`` store."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, bytes] = {}

    def get(self, url: str) -> bytes | None:
        """Return the cached content for *url*, or ``None`` on a miss."""
        return self._entries.get(url)

    def set(self, url: str, content: bytes) -> None:
        """Store *content* for *url*."""
        self._entries[url] = bytes(content)

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"ContentCache({len(self._entries)} entries)"
