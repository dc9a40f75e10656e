"""File-to-URL mapping.

Each file is classified once into a :class:`RouteKind`, and the kind
alone decides how its URL is derived:

============  ===========================================
kind          URL
============  ===========================================
ROOT_INDEX    ``root_path``
NESTED_INDEX  ``root_path/<subdir>``
ROOT_HTML     ``root_path/<stem>``
NESTED_HTML   ``root_path/<subdir>/<stem>``
ROOT_ASSET    ``root_path/<name.ext>``
NESTED_ASSET  ``root_path/<subdir>/<name.ext>``
============  ===========================================

``<subdir>`` is the file's directory relative to the static root. The
index check runs before the extension check, so ``index.html`` never
falls through to the plain HTML kinds.
"""

import posixpath
from pathlib import Path

from burma_static.routing.mime import MimeResolver
from burma_static.routing.route import Route, RouteKind

INDEX_FILE = "index.html"
HTML_EXT = ".html"


def classify(sub_dir: str, base: str, ext: str) -> RouteKind:
    """Classify a file by placement and kind.

    Args:
        sub_dir: Directory relative to the static root (``"."`` or ``""``
            for the root itself).
        base: File name with extension.
        ext: Extension with leading dot (``""`` when absent).
    """
    at_root = sub_dir in ("", ".")
    if base == INDEX_FILE:
        return RouteKind.ROOT_INDEX if at_root else RouteKind.NESTED_INDEX
    if ext == HTML_EXT:
        return RouteKind.ROOT_HTML if at_root else RouteKind.NESTED_HTML
    return RouteKind.ROOT_ASSET if at_root else RouteKind.NESTED_ASSET


def join_url(*parts: str) -> str:
    """Join URL segments with ``/``.

    Repeated separators collapse and ``.``/``..`` segments resolve.
    Characters are not percent-encoded.
    """
    joined = "/".join(part for part in parts if part)
    if not joined:
        return "/"
    normalized = posixpath.normpath(joined)
    # POSIX keeps a leading "//"; URLs don't
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def derive_url(kind: RouteKind, *, root_path: str, sub_dir: str, base: str, stem: str) -> str:
    """URL for a file of *kind*."""
    match kind:
        case RouteKind.ROOT_INDEX:
            return root_path
        case RouteKind.NESTED_INDEX:
            return join_url(root_path, sub_dir)
        case RouteKind.ROOT_HTML:
            return join_url(root_path, stem)
        case RouteKind.NESTED_HTML:
            return join_url(root_path, sub_dir, stem)
        case RouteKind.ROOT_ASSET:
            return join_url(root_path, base)
        case RouteKind.NESTED_ASSET:
            return join_url(root_path, sub_dir, base)


def map_route(
    file: Path,
    *,
    static_root: Path,
    root_path: str,
    resolver: MimeResolver,
) -> Route:
    """Build the :class:`Route` for one collected *file*.

    *file* must live under *static_root*.
    """
    sub_dir = file.parent.relative_to(static_root).as_posix()
    kind = classify(sub_dir, file.name, file.suffix)
    url = derive_url(kind, root_path=root_path, sub_dir=sub_dir, base=file.name, stem=file.stem)
    mime = resolver.resolve(file.suffix)
    return Route(
        file=file.absolute(),
        url=url,
        mime=mime.type,
        mime_category=mime.type_of,
        base=file.name,
        kind=kind,
    )
