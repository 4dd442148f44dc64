"""
Catalog Backend: Resource Service Base
=======================================

What:  Shared plumbing for every resource handler: run one statement through
       the gateway and translate store failures at the service boundary.
How:   Subclasses set `resource` (used in messages and logs) and
       `conflict_message` (used when the store reports a unique violation),
       then call `_execute`, `_fetch_one` or `_write_by_id`.

Error Translation:
    IntegrityError (unique violation) → ConflictError   (409)
    Any other SQLAlchemyError         → InternalError   (500)
    Zero rows / zero affected rows    → NotFoundError   (404)

    The original database error is logged here with the request's context;
    the client only ever sees the generic message.
"""

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.sql import Executable

from catalog_api.exceptions import ConflictError, InternalError, NotFoundError
from catalog_api.gateway import StoreResult, execute, is_unique_violation

logger = logging.getLogger(__name__)


class ResourceService:
    """
    Base class for the stateless per-resource services.

    Services hold no per-request state; a single module-level instance of
    each subclass serves every request.
    """

    resource: str = "resource"
    conflict_message: str = "The resource conflicts with an existing record."

    async def _execute(
        self, conn: AsyncConnection, statement: Executable, action: str
    ) -> StoreResult:
        """
        Run one statement, translating store errors.

        Args:
            conn: Connection for the current request
            statement: Core statement to run
            action: Verb used in log lines and error messages ("list", "create", ...)
        """
        try:
            return await execute(conn, statement)
        except IntegrityError as e:
            if is_unique_violation(e):
                logger.warning("Unique constraint rejected %s %s: %s", action, self.resource, e.orig)
                raise ConflictError(
                    message=self.conflict_message,
                    context={"resource": self.resource, "action": action},
                )
            logger.error("Integrity error trying to %s %s: %s", action, self.resource, e.orig)
            raise InternalError(
                message=f"Could not {action} {self.resource}. Please try again.",
                context={"resource": self.resource, "error_type": type(e).__name__},
            )
        except SQLAlchemyError as e:
            logger.error(
                "Database error trying to %s %s: %s", action, self.resource, str(e), exc_info=True
            )
            raise InternalError(
                message=f"Could not {action} {self.resource}. Please try again.",
                context={"resource": self.resource, "error_type": type(e).__name__},
            )

    async def _fetch_all(
        self, conn: AsyncConnection, statement: Executable, action: str = "list"
    ) -> List[Dict[str, Any]]:
        """Run a SELECT and return every matching record in order."""
        result = await self._execute(conn, statement, action)
        return result.records

    async def _fetch_one(
        self, conn: AsyncConnection, statement: Executable, resource_id: int
    ) -> Dict[str, Any]:
        """Run a SELECT expected to match one row; raise NotFoundError otherwise."""
        result = await self._execute(conn, statement, "retrieve")
        record = result.first()
        if record is None:
            raise NotFoundError(resource=self.resource, resource_id=resource_id)
        return record

    async def _insert(self, conn: AsyncConnection, statement: Executable) -> int:
        """Run an INSERT and return the store-generated identifier."""
        result = await self._execute(conn, statement, "create")
        logger.info("Created %s %s", self.resource, result.insert_id)
        return result.insert_id

    async def _write_by_id(
        self, conn: AsyncConnection, statement: Executable, resource_id: int, action: str
    ) -> None:
        """Run an UPDATE/DELETE addressed by id; zero affected rows is a 404."""
        result = await self._execute(conn, statement, action)
        if result.affected_rows == 0:
            raise NotFoundError(resource=self.resource, resource_id=resource_id)
        logger.info("%s %s %sd", self.resource.capitalize(), resource_id, action)
