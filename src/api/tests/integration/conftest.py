"""Integration test fixtures backed by a throwaway SQLite database.

Each test gets its own database file under ``tmp_path`` with the full
schema created from ``Base.metadata``. Set ``AGROFIX_TEST_DB_URL`` to run
against another store (e.g. PostgreSQL) instead; that database must
start empty.
"""

import os

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import infrastructure.database.dependencies as db_dependencies
from catalogue.infrastructure.models import ProductModel
from iam.dependencies.authentication import get_jwt_issuer, get_jwt_validator
from iam.infrastructure.models import UserModel
from infrastructure.database.engines import create_write_engine
from infrastructure.database.models import Base
from infrastructure.settings import (
    DatabaseSettings,
    get_auth_settings,
    get_database_settings,
    get_settings,
)
from ordering.infrastructure.models import OrderModel

INTEGRATION_JWT_SECRET = "integration-test-signing-key"

# Registered on Base.metadata for create_all
_MODELS = (UserModel, ProductModel, OrderModel)


def clear_cached_configuration() -> None:
    """Forget cached settings and token helpers so env changes apply."""
    for cached in (
        get_settings,
        get_database_settings,
        get_auth_settings,
        get_jwt_validator,
        get_jwt_issuer,
    ):
        cached.cache_clear()


@pytest.fixture
def db_url(tmp_path) -> str:
    """Async URL of the database used by this test."""
    return os.getenv(
        "AGROFIX_TEST_DB_URL", f"sqlite+aiosqlite:///{tmp_path / 'agrofix.db'}"
    )


@pytest_asyncio.fixture
async def engine(db_url):
    """Engine built the same way the application builds it, with schema."""
    engine = create_write_engine(DatabaseSettings(url=db_url))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    """Factory for independent sessions, one per simulated request."""
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def app_environment(db_url, engine, monkeypatch):
    """Point the application at the test database and a known signing key."""
    monkeypatch.setenv("AGROFIX_DB_URL", db_url)
    monkeypatch.setenv("AGROFIX_AUTH_JWT_SECRET", INTEGRATION_JWT_SECRET)
    monkeypatch.setenv("AGROFIX_AUTH_BCRYPT_ROUNDS", "4")
    monkeypatch.setattr(db_dependencies, "_write_engine", None)
    monkeypatch.setattr(db_dependencies, "_write_sessionmaker", None)
    clear_cached_configuration()

    yield

    clear_cached_configuration()


@pytest.fixture
def jwt_secret() -> str:
    """Signing key the application uses under ``app_environment``."""
    return INTEGRATION_JWT_SECRET
