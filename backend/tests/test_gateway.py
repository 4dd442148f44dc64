"""
Catalog Backend: Gateway Tests
===============================

What:  execute() returns Rows for SELECT and Write for DML;
       is_unique_violation() recognizes each driver's report.
"""

from types import SimpleNamespace

import pytest
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from catalog_api.gateway import Rows, Write, execute, is_unique_violation
from catalog_api.models import Skin

skins = Skin.__table__

SKIN = {"name": "Alex", "imageUrl": "https://cdn/alex.png", "rarity": "Common", "price": 0.0}


class TestExecute:

    @pytest.mark.asyncio
    async def test_insert_reports_generated_id(self, db_connection):
        result = await execute(db_connection, insert(skins).values(**SKIN))
        assert isinstance(result, Write)
        assert result.affected_rows == 1
        assert result.insert_id == 1

    @pytest.mark.asyncio
    async def test_select_returns_records_as_dicts(self, db_connection):
        await execute(db_connection, insert(skins).values(**SKIN))

        result = await execute(db_connection, select(skins))
        assert isinstance(result, Rows)
        assert result.records == [{"id": 1, **SKIN}]
        assert result.first()["imageUrl"] == "https://cdn/alex.png"

    @pytest.mark.asyncio
    async def test_empty_select(self, db_connection):
        result = await execute(db_connection, select(skins).where(skins.c.id == 5))
        assert result.records == []
        assert result.first() is None

    @pytest.mark.asyncio
    async def test_update_and_delete_count_affected_rows(self, db_connection):
        await execute(db_connection, insert(skins).values(**SKIN))

        updated = await execute(
            db_connection, update(skins).where(skins.c.id == 1).values(price=10.0)
        )
        missing = await execute(db_connection, delete(skins).where(skins.c.id == 2))

        assert updated == Write(affected_rows=1)
        assert missing == Write(affected_rows=0)

    @pytest.mark.asyncio
    async def test_user_value_is_bound_not_interpolated(self, db_connection):
        await execute(db_connection, insert(skins).values(**{**SKIN, "name": "x'); DROP TABLE skins; --"}))

        result = await execute(db_connection, select(skins.c.name))
        assert result.first()["name"] == "x'); DROP TABLE skins; --"


def integrity_error(orig):
    return IntegrityError("INSERT INTO users ...", {}, orig)


class TestUniqueViolation:

    def test_postgres_sqlstate(self):
        assert is_unique_violation(integrity_error(SimpleNamespace(sqlstate="23505", args=())))

    def test_postgres_foreign_key_is_not_unique(self):
        assert not is_unique_violation(integrity_error(SimpleNamespace(sqlstate="23503", args=())))

    def test_mysql_duplicate_entry(self):
        orig = Exception(1062, "Duplicate entry 'alex@example.com' for key 'email'")
        assert is_unique_violation(integrity_error(orig))

    def test_sqlite_message(self):
        orig = Exception("UNIQUE constraint failed: users.email")
        assert is_unique_violation(integrity_error(orig))

    def test_not_null_is_not_unique(self):
        orig = Exception("NOT NULL constraint failed: users.name")
        assert not is_unique_violation(integrity_error(orig))
