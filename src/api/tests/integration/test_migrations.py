"""Integration tests for the Alembic migration chain."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text

from infrastructure.settings import get_database_settings

pytestmark = pytest.mark.integration

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"


@pytest.fixture
def migration_db(tmp_path, monkeypatch):
    """Point migrations at an empty SQLite file; yield a sync URL for checks."""
    path = tmp_path / "migrated.db"
    monkeypatch.setenv("AGROFIX_DB_URL", f"sqlite+aiosqlite:///{path}")
    get_database_settings.cache_clear()

    yield f"sqlite:///{path}"

    get_database_settings.cache_clear()


@pytest.fixture
def alembic_config() -> Config:
    return Config(str(ALEMBIC_INI))


def test_upgrade_creates_schema_and_seeds_catalogue(migration_db, alembic_config):
    command.upgrade(alembic_config, "head")

    engine = create_engine(migration_db)
    try:
        assert {"users", "products", "orders"} <= set(inspect(engine).get_table_names())
        with engine.connect() as conn:
            rows = conn.execute(
                text("SELECT name, price, quantity FROM products ORDER BY id")
            ).all()
    finally:
        engine.dispose()

    assert [tuple(r) for r in rows] == [
        ("Apple", 30, 100),
        ("Banana", 15, 150),
        ("Carrot", 20, 120),
        ("Tomato", 25, 80),
        ("Cucumber", 18, 90),
    ]


def test_downgrade_to_base_drops_everything(migration_db, alembic_config):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")

    engine = create_engine(migration_db)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()

    assert tables.isdisjoint({"users", "products", "orders"})
