"""
Catalog Backend: Database Gateway
==================================

What:  Executes one SQLAlchemy Core statement and returns a tagged result.
How:   The statement kind decides the result shape:
         SELECT                 → Rows(records)
         INSERT/UPDATE/DELETE   → Write(affected_rows, insert_id)
       Callers pattern-match on the type instead of casting driver results.
Who:   Called by every resource service (through ResourceService._execute).

Parameter Safety:
    Statements are built with select()/insert()/update()/delete(); every
    user-supplied value becomes a bound parameter that the driver substitutes
    positionally. No value is ever formatted into SQL text.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.sql import Executable

# SQLSTATE class 23, unique_violation (PostgreSQL, and MySQL via its SQLSTATE)
UNIQUE_VIOLATION_SQLSTATE = "23505"


@dataclass(frozen=True)
class Rows:
    """Result of a SELECT: the ordered records as plain dicts."""
    records: List[Dict[str, Any]] = field(default_factory=list)

    def first(self) -> Optional[Dict[str, Any]]:
        return self.records[0] if self.records else None


@dataclass(frozen=True)
class Write:
    """Result of an INSERT, UPDATE or DELETE."""
    affected_rows: int
    insert_id: Optional[int] = None


StoreResult = Union[Rows, Write]


async def execute(conn: AsyncConnection, statement: Executable) -> StoreResult:
    """
    Run a single statement on the given connection.

    Args:
        conn: Pooled connection for the current request
        statement: A Core select/insert/update/delete construct

    Returns:
        Rows for SELECT statements, Write for DML statements

    Raises:
        sqlalchemy.exc.SQLAlchemyError: propagated unchanged; services
        translate it at their own boundary.
    """
    result = await conn.execute(statement)

    if statement.is_select:
        return Rows(records=[dict(row) for row in result.mappings().all()])

    insert_id = None
    if statement.is_insert:
        primary_key = result.inserted_primary_key
        insert_id = primary_key[0] if primary_key else None
    return Write(affected_rows=result.rowcount, insert_id=insert_id)


def is_unique_violation(exc: IntegrityError) -> bool:
    """
    Tell a unique-constraint violation apart from other integrity errors.

    Drivers that expose a SQLSTATE (asyncpg, MySQL drivers) are matched on
    the code; SQLite only reports it in the message text.
    """
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code == UNIQUE_VIOLATION_SQLSTATE
    if getattr(orig, "args", None) and orig.args[0] == 1062:
        # MySQL ER_DUP_ENTRY
        return True
    text = str(orig).lower()
    return "unique" in text or "duplicate" in text
