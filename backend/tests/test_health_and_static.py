"""
Sikkim Tourism Backend — Health Check & Static Site Tests
===========================================================

What we test:
    ✅ GET /api/health → {"status": "ok", "time": <ISO 8601 UTC>}
    ✅ Every response carries an X-Request-ID (client-supplied IDs are echoed)
    ✅ Unmatched API routes → JSON 404
    ✅ With a public dir: files served, unmatched paths fall back to index.html,
       API paths never fall back
    ✅ Without index.html, or without a public dir, unmatched paths → JSON 404
"""

from datetime import datetime

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from sikkim.bootstrap import init_db
from sikkim.main import create_app

from conftest import make_settings


@pytest_asyncio.fixture
async def site_client(tmp_path):
    """Client for an app whose PUBLIC_DIR holds a tiny SPA build."""
    public = tmp_path / "site"
    (public / "assets").mkdir(parents=True)
    (public / "index.html").write_text("<html><body>Sikkim SPA</body></html>")
    (public / "assets" / "app.js").write_text("console.log('sikkim');")

    app = create_app(make_settings(tmp_path, public_dir=str(public)))
    await init_db(app.state.database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client, public
    await app.state.database.dispose()


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["time"].endswith("Z")
        datetime.fromisoformat(body["time"].replace("Z", "+00:00"))

    @pytest.mark.asyncio
    async def test_request_id_header(self, test_client):
        generated = await test_client.get("/api/health")
        echoed = await test_client.get("/api/health", headers={"X-Request-ID": "trace-42"})

        assert generated.headers["X-Request-ID"]
        assert echoed.headers["X-Request-ID"] == "trace-42"


class TestUnmatchedRoutes:

    @pytest.mark.asyncio
    async def test_unknown_api_route_without_public_dir(self, test_client):
        response = await test_client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json()["error"] == "not found"

    @pytest.mark.asyncio
    async def test_unknown_page_without_public_dir(self, test_client):
        response = await test_client.get("/destinations/tsomgo")
        assert response.status_code == 404


class TestStaticSite:

    @pytest.mark.asyncio
    async def test_serves_index_at_root(self, site_client):
        client, _ = site_client
        response = await client.get("/")

        assert response.status_code == 200
        assert "Sikkim SPA" in response.text

    @pytest.mark.asyncio
    async def test_serves_asset(self, site_client):
        client, _ = site_client
        response = await client.get("/assets/app.js")

        assert response.status_code == 200
        assert "console.log" in response.text

    @pytest.mark.asyncio
    async def test_unmatched_page_falls_back_to_entry_document(self, site_client):
        client, _ = site_client
        response = await client.get("/destinations/tsomgo")

        assert response.status_code == 200
        assert "Sikkim SPA" in response.text

    @pytest.mark.asyncio
    async def test_api_routes_take_precedence(self, site_client):
        client, _ = site_client
        response = await client.get("/api/destinations")

        assert response.status_code == 200
        assert len(response.json()["data"]) == 3

    @pytest.mark.asyncio
    async def test_unknown_api_route_never_falls_back(self, site_client):
        client, _ = site_client
        response = await client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json()["error"] == "not found"

    @pytest.mark.asyncio
    async def test_no_fallback_without_entry_document(self, site_client):
        client, public = site_client
        (public / "index.html").unlink()

        response = await client.get("/destinations/tsomgo")

        assert response.status_code == 404
