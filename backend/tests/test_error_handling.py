"""
Sikkim Tourism Backend — Error Response Tests
===============================================

What:  The HTTP side of failures that originate below the routes.

What we test:
    ✅ A failing SQLite statement → 500 {"error": "db error", "details": <driver text>}
       and nothing is written
    ✅ An unexpected exception → 500 {"error": "internal server error"} with no
       internals leaked, and the request id in both header and body
"""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

from sikkim.models import Contact
from sikkim.services.destination_service import destination_service

from conftest import count_rows


@pytest_asyncio.fixture
async def lenient_client(app):
    """
    Client that receives the 500 response instead of the re-raised exception.

    Starlette's ServerErrorMiddleware sends the handler's response and then
    re-raises for the server to log; ASGITransport would surface that raise.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestDatabaseErrorResponse:

    @pytest.mark.asyncio
    async def test_failed_insert_returns_db_error_with_details(self, test_client, app):
        async with app.state.database.engine.begin() as conn:
            await conn.execute(
                text(
                    "CREATE TRIGGER contacts_closed BEFORE INSERT ON contacts "
                    "BEGIN SELECT RAISE(ABORT, 'contacts are closed'); END"
                )
            )

        response = await test_client.post(
            "/api/contact", json={"email": "anon@example.com", "message": "Hello"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "db error"
        assert "contacts are closed" in body["details"]
        assert body["request_id"] == response.headers["X-Request-ID"]
        assert await count_rows(app.state.database, Contact) == 0

    @pytest.mark.asyncio
    async def test_missing_table_returns_db_error(self, test_client, app, admin_headers):
        async with app.state.database.engine.begin() as conn:
            await conn.execute(text("DROP TABLE contacts"))

        response = await test_client.get("/api/contacts", headers=admin_headers)

        assert response.status_code == 500
        assert response.json()["error"] == "db error"
        assert "no such table" in response.json()["details"]


class TestUnexpectedErrorResponse:

    @pytest.mark.asyncio
    async def test_generic_500(self, lenient_client, monkeypatch):
        monkeypatch.setattr(
            destination_service,
            "list_destinations",
            AsyncMock(side_effect=RuntimeError("disk on fire")),
        )

        response = await lenient_client.get(
            "/api/destinations", headers={"X-Request-ID": "trace-500"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal server error"
        assert "disk on fire" not in response.text
        assert body["request_id"] == "trace-500"
        assert response.headers["X-Request-ID"] == "trace-500"
