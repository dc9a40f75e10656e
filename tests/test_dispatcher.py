"""Tests for burma_static.server.dispatcher — matching, caching, 404s."""

import io
import logging
from pathlib import Path

import anyio
import pytest

from burma_static import burma_static
from burma_static.cache import ContentCache
from burma_static.config import StaticConfig
from burma_static.http.pages import NOT_FOUND_HTML
from burma_static.routing.table import generate_routes
from burma_static.server.dispatcher import StaticApp
from burma_static.testing import TestClient

pytestmark = pytest.mark.anyio

ACCESS = "burma_static.access"


@pytest.fixture
def app(site: Path) -> StaticApp:
    return burma_static(static_dir="public")


class TestMatching:
    async def test_serves_root_index(self, app: StaticApp) -> None:
        async with TestClient(app) as client:
            response = await client.get("/")
        assert response.status == 200
        assert response.body == b"<h1>Home</h1>"

    @pytest.mark.parametrize(
        ("url", "body"),
        [
            ("/about", b"<h1>About</h1>"),
            ("/blog", b"<h1>Blog</h1>"),
            ("/blog/post", b"<h1>Post</h1>"),
            ("/logo.png", b"\x89PNG\r\n\x1a\n"),
            ("/assets/logo.png", b"\x89PNG\r\n\x1a\nassets"),
            ("/assets/app.css", b"body { color: red; }"),
        ],
    )
    async def test_serves_each_route(self, app: StaticApp, url: str, body: bytes) -> None:
        async with TestClient(app) as client:
            response = await client.get(url)
        assert response.status == 200
        assert response.body == body

    @pytest.mark.parametrize(
        "url",
        ["/about.html", "/about/", "/About", "/about?x=1", "/blog/index.html", "/README.md"],
    )
    async def test_no_normalization(self, app: StaticApp, url: str) -> None:
        async with TestClient(app) as client:
            response = await client.get(url)
        assert response.status == 404

    async def test_root_path_prefix(self, site: Path) -> None:
        app = burma_static(static_dir="public", root_path="/static")
        async with TestClient(app) as client:
            assert (await client.get("/static/about")).status == 200
            assert (await client.get("/about")).status == 404


class TestNotFound:
    @pytest.mark.parametrize("method", ["GET", "HEAD", "POST", "DELETE", "PATCH"])
    async def test_any_method_gets_fixed_document(self, app: StaticApp, method: str) -> None:
        async with TestClient(app) as client:
            response = await client.request(method, "/missing")
        assert response.status == 404
        assert response.body == NOT_FOUND_HTML.encode("utf-8")

    async def test_empty_table_always_404(self, site: Path) -> None:
        app = burma_static(static_dir="does-not-exist")
        assert len(app.routes) == 0
        async with TestClient(app) as client:
            assert (await client.get("/")).status == 404

    async def test_not_found_is_not_access_logged(
        self, app: StaticApp, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger=ACCESS)
        async with TestClient(app) as client:
            await client.get("/missing")
        assert not [r for r in caplog.records if r.name == ACCESS]


class TestMethods:
    async def test_matching_route_ignores_method(self, app: StaticApp) -> None:
        async with TestClient(app) as client:
            response = await client.post("/about", body=b"ignored")
        assert response.status == 200
        assert response.body == b"<h1>About</h1>"


class TestCache:
    async def test_second_request_served_from_cache(
        self, app: StaticApp, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger=ACCESS)
        async with TestClient(app) as client:
            first = await client.get("/about")
            second = await client.get("/about")

        assert first.body == second.body == b"<h1>About</h1>"
        lines = [r.getMessage() for r in caplog.records if r.name == ACCESS]
        assert lines == ["GET /about 200", "GET /about 200 (from cache)"]

    async def test_miss_populates_cache(self, app: StaticApp) -> None:
        assert "/about" not in app.cache
        async with TestClient(app) as client:
            await client.get("/about")
        assert app.cache.get("/about") == b"<h1>About</h1>"

    async def test_cache_is_never_invalidated(self, app: StaticApp, site: Path) -> None:
        async with TestClient(app) as client:
            await client.get("/about")
            (site / "about.html").write_bytes(b"<h1>Changed</h1>")
            response = await client.get("/about")
        assert response.body == b"<h1>About</h1>"

    async def test_injected_cache_is_used(self, site: Path) -> None:
        cache = ContentCache()
        cache.set("/about", b"preloaded")
        app = burma_static(static_dir="public", cache=cache)
        assert app.cache is cache
        async with TestClient(app) as client:
            response = await client.get("/about")
        assert response.body == b"preloaded"

    async def test_apps_do_not_share_caches(self, site: Path) -> None:
        first = burma_static(static_dir="public")
        second = burma_static(static_dir="public")
        async with TestClient(first) as client:
            await client.get("/about")
        assert "/about" in first.cache
        assert "/about" not in second.cache

    async def test_access_log_can_be_disabled(
        self, site: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger=ACCESS)
        app = burma_static(static_dir="public", access_log=False)
        async with TestClient(app) as client:
            await client.get("/about")
        assert not [r for r in caplog.records if r.name == ACCESS]

    async def test_access_line_reaches_host_handler(
        self, app: StaticApp, caplog: pytest.LogCaptureFixture
    ) -> None:
        assert logging.getLogger(ACCESS).handlers == []
        caplog.set_level(logging.INFO)
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        logging.getLogger().addHandler(handler)
        try:
            async with TestClient(app) as client:
                await client.get("/about")
        finally:
            logging.getLogger().removeHandler(handler)
        assert stream.getvalue() == "GET /about 200\n"

    async def test_query_string_request_is_not_served(
        self, site: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger=ACCESS)
        app = burma_static(static_dir="public")
        async with TestClient(app) as client:
            await client.get("/?x=1")
            await client.get("/")
        lines = [r.getMessage() for r in caplog.records if r.name == ACCESS]
        assert lines == ["GET / 200"]


class TestContentType:
    async def test_no_content_type_by_default(self, app: StaticApp) -> None:
        async with TestClient(app) as client:
            miss = await client.get("/assets/app.css")
            hit = await client.get("/assets/app.css")
        assert miss.content_type is None
        assert hit.content_type is None

    async def test_opt_in_content_type(self, site: Path) -> None:
        app = burma_static(static_dir="public", send_content_type=True)
        async with TestClient(app) as client:
            miss = await client.get("/assets/app.css")
            hit = await client.get("/assets/app.css")
        assert miss.content_type == "text/css"
        assert hit.content_type == "text/css"

    async def test_opt_in_skips_unknown_types(self, site: Path) -> None:
        (site / "data.unknownext").write_bytes(b"?")
        app = burma_static(static_dir="public", send_content_type=True)
        async with TestClient(app) as client:
            response = await client.get("/data.unknownext")
        assert response.status == 200
        assert response.content_type is None


class TestConcurrency:
    async def test_simultaneous_first_requests_get_full_content(self, site: Path) -> None:
        payload = bytes(range(256)) * 1024
        (site / "big.bin").write_bytes(payload)
        app = burma_static(static_dir="public")
        bodies: list[bytes] = []

        async def fetch() -> None:
            async with TestClient(app) as client:
                bodies.append((await client.get("/big.bin")).body)

        async with anyio.create_task_group() as tg:
            for _ in range(4):
                tg.start_soon(fetch)

        assert bodies == [payload] * 4
        assert app.cache.get("/big.bin") == payload


class TestErrors:
    async def test_removed_file_propagates(self, app: StaticApp, site: Path) -> None:
        (site / "about.html").unlink()
        async with TestClient(app) as client:
            with pytest.raises(FileNotFoundError):
                await client.get("/about")
        assert "/about" not in app.cache


class TestASGI:
    async def test_lifespan_is_acknowledged(self, app: StaticApp) -> None:
        incoming = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(incoming)

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "lifespan"}, receive, send)
        assert sent == [
            {"type": "lifespan.startup.complete"},
            {"type": "lifespan.shutdown.complete"},
        ]

    async def test_websocket_scope_is_ignored(self, app: StaticApp) -> None:
        sent: list[dict] = []

        async def receive() -> dict:
            return {"type": "websocket.connect"}

        async def send(message: dict) -> None:
            sent.append(message)

        await app({"type": "websocket", "path": "/"}, receive, send)
        assert sent == []

    async def test_static_app_from_table(self, site: Path) -> None:
        config = StaticConfig(static_dir="public")
        app = StaticApp(generate_routes(config), config=config)
        async with TestClient(app) as client:
            assert (await client.get("/blog")).body == b"<h1>Blog</h1>"

    async def test_factory_accepts_config_and_overrides(self, site: Path) -> None:
        app = burma_static(StaticConfig(static_dir="public"), root_path="/s")
        assert app.config.root_path == "/s"
        assert "/s/about" in app.routes
