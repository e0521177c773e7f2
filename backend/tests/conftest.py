"""
Sikkim Tourism Backend — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every API test gets its own application built by create_app() around a
       fresh SQLite file in pytest's tmp_path, bootstrapped (tables + seed)
       before the client is handed out.

Fixture Hierarchy (all function-scoped):
    ├── test_settings: Settings pointing at a temporary database
    ├── database: Database over that file, bootstrapped
    ├── app: FastAPI app built with test_settings, bootstrapped
    ├── test_client: HTTPX AsyncClient talking to `app` through ASGITransport
    ├── admin_headers: Headers carrying the correct admin token
    └── mock_db_session: AsyncMock session for service unit tests
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

# Keep the module-level `sikkim.main:app` away from any real database file
_scratch = tempfile.mkdtemp(prefix="sikkim_test_")
os.environ["DB_PATH"] = os.path.join(_scratch, "default.db")
os.environ["PUBLIC_DIR"] = os.path.join(_scratch, "no-public-dir")
os.environ["LOG_LEVEL"] = "WARNING"

from sikkim.bootstrap import init_db  # noqa: E402
from sikkim.config import Settings  # noqa: E402
from sikkim.database import Database  # noqa: E402
from sikkim.main import create_app  # noqa: E402

ADMIN_TOKEN = "test-admin-token"


def make_settings(tmp_path, **overrides) -> Settings:
    """Settings for an isolated app; keyword overrides win."""
    values = {
        "db_path": str(tmp_path / "sikkim-test.db"),
        "admin_token": ADMIN_TOKEN,
        "public_dir": str(tmp_path / "no-public-dir"),
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


async def count_rows(database: Database, model) -> int:
    """SELECT COUNT(*) FROM <model's table>."""
    async with database.session() as session:
        return await session.scalar(select(func.count()).select_from(model))


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def admin_headers() -> dict:
    return {"X-ADMIN-TOKEN": ADMIN_TOKEN}


@pytest_asyncio.fixture
async def database(test_settings):
    """A bootstrapped Database on the temporary file, disposed afterwards."""
    db = Database(test_settings.database_url)
    await init_db(db)
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def app(test_settings):
    """
    A bootstrapped application.

    ASGITransport does not run the lifespan, so bootstrap is invoked here
    exactly as the lifespan would.
    """
    application = create_app(test_settings)
    await init_db(application.state.database)
    yield application
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = []
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.get = AsyncMock()
    session.add = MagicMock()
    return session
