"""
Catalog Backend: Education Service (Minecraft Education Edition)
=================================================================

What:  Resource handlers for subjects (list), lessons (filtered list, get,
       create, update, delete) and the lessons-by-subject report.
Who:   Called by routes/education.py.

Filter Construction (GET /api/education/lessons):
    ?title=fra      → lessons.title LIKE '%fra%' (% and _ escaped)
    ?subject_id=3   → lessons.subject_id = 3
    Results ordered by title.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.models.education import Lesson, Subject
from catalog_api.schemas.education import (
    LessonPayload,
    LessonReportItem,
    LessonResponse,
    SubjectResponse,
)
from catalog_api.services.base import ResourceService

logger = logging.getLogger(__name__)

subjects = Subject.__table__
lessons = Lesson.__table__


class SubjectService(ResourceService):
    resource = "subject"

    async def list_subjects(self, conn: AsyncConnection) -> List[SubjectResponse]:
        query = select(subjects.c.id, subjects.c.name).order_by(subjects.c.name)
        records = await self._fetch_all(conn, query)
        return [SubjectResponse(**record) for record in records]


class LessonService(ResourceService):
    resource = "lesson"

    async def list_lessons(
        self,
        conn: AsyncConnection,
        title: Optional[str] = None,
        subject_id: Optional[int] = None,
    ) -> List[LessonResponse]:
        query = select(lessons)
        if title:
            query = query.where(lessons.c.title.contains(title, autoescape=True))
        if subject_id is not None:
            query = query.where(lessons.c.subject_id == subject_id)
        query = query.order_by(lessons.c.title)
        logger.debug("Listing lessons title=%r subject_id=%r", title, subject_id)

        records = await self._fetch_all(conn, query)
        return [LessonResponse(**record) for record in records]

    async def get_lesson(self, conn: AsyncConnection, lesson_id: int) -> LessonResponse:
        record = await self._fetch_one(
            conn, select(lessons).where(lessons.c.id == lesson_id), lesson_id
        )
        return LessonResponse(**record)

    async def create_lesson(self, conn: AsyncConnection, payload: LessonPayload) -> LessonResponse:
        new_id = await self._insert(conn, insert(lessons).values(**payload.model_dump()))
        return LessonResponse(id=new_id, **payload.model_dump())

    async def update_lesson(
        self, conn: AsyncConnection, lesson_id: int, payload: LessonPayload
    ) -> LessonResponse:
        statement = (
            update(lessons)
            .where(lessons.c.id == lesson_id)
            .values(**payload.model_dump())
        )
        await self._write_by_id(conn, statement, lesson_id, "update")
        return LessonResponse(id=lesson_id, **payload.model_dump())

    async def delete_lesson(self, conn: AsyncConnection, lesson_id: int) -> None:
        await self._write_by_id(
            conn, delete(lessons).where(lessons.c.id == lesson_id), lesson_id, "delete"
        )

    async def lessons_by_subject(self, conn: AsyncConnection) -> List[LessonReportItem]:
        """
        Lessons joined with their subject name, grouped by subject.

        Only lessons whose subject exists appear (inner join).
        """
        query = (
            select(
                lessons.c.id,
                lessons.c.title,
                lessons.c.description,
                lessons.c.target_age_group,
                subjects.c.name.label("subject_name"),
            )
            .select_from(lessons.join(subjects, lessons.c.subject_id == subjects.c.id))
            .order_by(subjects.c.name, lessons.c.title)
        )
        records = await self._fetch_all(conn, query, "report")
        return [LessonReportItem(**record) for record in records]


# ── Singleton Instances ───────────────────────────────────────────────────
subject_service = SubjectService()
lesson_service = LessonService()
