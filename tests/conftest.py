"""Shared fixtures: a small static site inside a temporary working directory."""

from pathlib import Path

import pytest

SITE_FILES: dict[str, bytes] = {
    "index.html": b"<h1>Home</h1>",
    "about.html": b"<h1>About</h1>",
    "logo.png": b"\x89PNG\r\n\x1a\n",
    "blog/index.html": b"<h1>Blog</h1>",
    "blog/post.html": b"<h1>Post</h1>",
    "assets/logo.png": b"\x89PNG\r\n\x1a\nassets",
    "assets/app.css": b"body { color: red; }",
    "node_modules/lib/index.js": b"module.exports = {};",
    "README.md": b"# readme",
    "package.json": b"{}",
}


def write_tree(root: Path, files: dict[str, bytes]) -> Path:
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
    return root


@pytest.fixture
def site(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """``<tmp>/public`` populated with SITE_FILES; cwd is ``<tmp>``."""
    monkeypatch.chdir(tmp_path)
    return write_tree(tmp_path / "public", SITE_FILES)
