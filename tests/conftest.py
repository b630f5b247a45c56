"""Pytest configuration and fixtures."""
import itertools
import os
from datetime import UTC, datetime
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config as AlembicConfig
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

BASE_DIR = Path(__file__).resolve().parent.parent
TEST_DB_PATH = BASE_DIR / "test.db"

# Ensure the application uses a dedicated SQLite database during tests
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_DIR"] = str(BASE_DIR / "logs")

from eveapi.config import get_settings

settings = get_settings()

# Rows written by services are committed, so every test draws fresh ids
_ids = itertools.count(98_000_001)


@pytest.fixture(scope="session", autouse=True)
def apply_migrations():
    """Apply database migrations against the test database."""
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()

    alembic_cfg = AlembicConfig(str(BASE_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
    command.upgrade(alembic_cfg, "head")

    yield

    if TEST_DB_PATH.exists():
        try:
            TEST_DB_PATH.unlink()
        except PermissionError:
            # On Windows, database might still be in use
            pass


@pytest.fixture
async def test_engine():
    """Create test database engine using the same database as migrations."""
    engine = create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    """Create test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()
        await session.close()


@pytest.fixture
async def test_app(test_engine):
    """Create test app with database override."""
    from eveapi.main import app
    from eveapi.database import get_db

    async def override_get_db():
        async_session = async_sessionmaker(
            test_engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with async_session() as session:
            try:
                yield session
            finally:
                await session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def next_id():
    """Return a callable handing out ids unique across the test session."""
    return lambda: next(_ids)


@pytest.fixture
async def corporation_factory(db_session, next_id):
    """Factory for committed corporation sheets."""
    from eveapi.models import CorporationInfo

    async def _create_corporation(**overrides):
        corporation_id = overrides.pop("corporation_id", None) or next_id()
        values = {
            "corporation_id": corporation_id,
            "name": f"Test Corporation {corporation_id}",
            "ticker": f"T{corporation_id % 10000}",
            "member_count": 10,
            "ceo_id": next_id(),
            "creator_id": next_id(),
            "tax_rate": 0.1,
            "date_founded": datetime(2019, 5, 1, 12, 0, tzinfo=UTC),
        }
        values.update(overrides)

        corporation = CorporationInfo(**values)
        db_session.add(corporation)
        await db_session.commit()
        # Detach so later queries load relationships from the database
        db_session.expunge(corporation)
        return corporation

    return _create_corporation
