"""
Catalog Backend: Migration Tests
=================================

Runs the Alembic revisions against a throwaway SQLite file and checks the
resulting schema against the ORM metadata.
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

import catalog_api.models  # noqa: F401
from catalog_api.config import settings
from catalog_api.database import Base

ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"


@pytest.fixture
def migration_db(tmp_path, monkeypatch):
    db_file = tmp_path / "catalog.db"
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{db_file}")
    return db_file


def _tables(db_file: Path) -> set:
    engine = create_engine(f"sqlite:///{db_file}")
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


class TestMigrations:
    def test_upgrade_creates_every_model_table(self, migration_db):
        command.upgrade(Config(str(ALEMBIC_INI)), "head")

        assert _tables(migration_db) == set(Base.metadata.tables) | {"alembic_version"}

    def test_upgrade_creates_products_created_at_index(self, migration_db):
        command.upgrade(Config(str(ALEMBIC_INI)), "head")

        engine = create_engine(f"sqlite:///{migration_db}")
        try:
            names = {index["name"] for index in inspect(engine).get_indexes("products")}
        finally:
            engine.dispose()
        assert "idx_products_created_at" in names

    def test_downgrade_drops_catalog_tables(self, migration_db):
        cfg = Config(str(ALEMBIC_INI))
        command.upgrade(cfg, "head")
        command.downgrade(cfg, "base")

        assert _tables(migration_db) == {"alembic_version"}
