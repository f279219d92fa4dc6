"""Pytest configuration and fixtures for the DNA Architect API.

Environment is pinned before app.main is imported: a throwaway SQLite
database (aiosqlite) and a temporary local upload root. Set
TEST_DATABASE_URL to run the API tests against another database.
"""

import os
import tempfile
from pathlib import Path

_TEST_ROOT = Path(tempfile.mkdtemp(prefix="dna-architect-tests-"))
os.environ["DATABASE_URL"] = os.environ.get(
    "TEST_DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_ROOT / 'test.db'}"
)
os.environ["UPLOAD_DIR"] = str(_TEST_ROOT / "uploads")
os.environ["STORAGE_PROVIDER"] = "local"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from app.core.config import get_settings  # noqa: E402
from app.core.lifespan import create_lifespan  # noqa: E402
from app.infrastructure.persistence import database  # noqa: E402
from app.infrastructure.persistence.database import Base, dispose_engine  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def upload_root() -> Path:
    """Root directory of the local sink used by the app under test."""
    return Path(get_settings().upload_dir)


@pytest.fixture
async def db_tables():
    """Create all tables before the test and drop them afterwards."""
    database._ensure_engine()
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    database._ensure_engine()
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await dispose_engine()


@pytest.fixture
async def client(db_tables) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), with lifespan run.

    ASGITransport does not send lifespan events, so startup (storage
    dispatcher) and shutdown are driven here.
    """
    async with create_lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session(db_tables) -> AsyncSession:
    """Database session for repository tests. Rolls back after test."""
    database._ensure_engine()
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
