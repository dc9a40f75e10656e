"""MIME classification for discovered files.

``lookup_mime`` is the default collaborator (stdlib ``mimetypes``).
``MimeResolver`` memoizes any lookup per extension for the duration of
one route-generation run.
"""

import mimetypes
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class MimeInfo:
    """Resolved MIME type and its coarse category.

    ``type_of`` is the first segment of ``type`` (``"text"`` for
    ``"text/html"``). Unknown extensions resolve to empty strings.
    """

    type: str = ""
    type_of: str = ""


# Extension (with leading dot, or "") -> MimeInfo, a mapping, or None
MimeLookup: TypeAlias = Callable[[str], MimeInfo | Mapping[str, Any] | None]


def lookup_mime(ext: str) -> MimeInfo:
    """Resolve *ext* (e.g. ``".css"``) through the stdlib MIME table."""
    if not ext:
        return MimeInfo()
    mime, _ = mimetypes.guess_type(f"file{ext}", strict=False)
    if mime is None:
        return MimeInfo()
    return MimeInfo(type=mime, type_of=mime.partition("/")[0])


def _coerce(result: MimeInfo | Mapping[str, Any] | None) -> MimeInfo:
    if isinstance(result, MimeInfo):
        return result
    if result is None:
        return MimeInfo()
    type_of = result.get("type_of", result.get("typeOf"))
    return MimeInfo(type=result.get("type") or "", type_of=type_of or "")


class MimeResolver:
    """Per-run memo in front of a MIME lookup.

    The lookup is called at most once per distinct extension; ``calls``
    counts the real lookups.
    """

    __slots__ = ("_cache", "_lookup", "calls")

    def __init__(self, lookup: MimeLookup = lookup_mime) -> None:
        self._lookup = lookup
        self._cache: dict[str, MimeInfo] = {}
        self.calls = 0

    def resolve(self, ext: str) -> MimeInfo:
        """Return the MIME info for *ext*, calling the lookup on first use."""
        info = self._cache.get(ext)
        if info is None:
            self.calls += 1
            info = _coerce(self._lookup(ext))
            self._cache[ext] = info
        return info
