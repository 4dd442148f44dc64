"""
Catalog Backend: Education Route Handlers
==========================================

What:  Handles the Education Edition catalog under /api/education:
           GET  /subjects                 → {"data": [...]}
           GET  /lessons?title=&subject_id= → {"data": [...]}
           POST /lessons
           GET|PUT|DELETE /lessons/{id}
           GET  /report                   → {"data": [...]}
Who:   Called by the Education Edition lesson library.

List endpoints wrap their rows in a `data` key; single-lesson endpoints
return the lesson object itself.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_api.database import get_db_connection
from catalog_api.routes.params import OptionalIdFilter, ResourceId
from catalog_api.schemas.common import ErrorResponse
from catalog_api.schemas.education import (
    LessonListResponse,
    LessonPayload,
    LessonReportResponse,
    LessonResponse,
    SubjectListResponse,
)
from catalog_api.services.education_service import lesson_service, subject_service

router = APIRouter(prefix="/api/education", tags=["Education"])


@router.get("/subjects", response_model=SubjectListResponse, summary="List subjects")
async def list_subjects(conn: AsyncConnection = Depends(get_db_connection)):
    return SubjectListResponse(data=await subject_service.list_subjects(conn))


@router.get(
    "/lessons",
    response_model=LessonListResponse,
    responses={400: {"description": "Non-numeric subject_id", "model": ErrorResponse}},
    summary="List lessons",
    description="Lessons ordered by title, optionally filtered by title substring and subject.",
)
async def list_lessons(
    title: Optional[str] = Query(default=None, description="Substring of the lesson title"),
    subject_id: OptionalIdFilter = None,
    conn: AsyncConnection = Depends(get_db_connection),
):
    lessons = await lesson_service.list_lessons(conn, title=title, subject_id=subject_id)
    return LessonListResponse(data=lessons)


@router.get(
    "/lessons/{lesson_id}",
    response_model=LessonResponse,
    responses={404: {"description": "Lesson not found", "model": ErrorResponse}},
    summary="Get a single lesson by ID",
)
async def get_lesson(lesson_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    return await lesson_service.get_lesson(conn, lesson_id)


@router.post(
    "/lessons",
    response_model=LessonResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid payload", "model": ErrorResponse}},
    summary="Create a lesson",
)
async def create_lesson(payload: LessonPayload, conn: AsyncConnection = Depends(get_db_connection)):
    return await lesson_service.create_lesson(conn, payload)


@router.put(
    "/lessons/{lesson_id}",
    response_model=LessonResponse,
    responses={
        400: {"description": "Invalid payload", "model": ErrorResponse},
        404: {"description": "Lesson not found", "model": ErrorResponse},
    },
    summary="Replace a lesson",
)
async def update_lesson(
    lesson_id: ResourceId,
    payload: LessonPayload,
    conn: AsyncConnection = Depends(get_db_connection),
):
    return await lesson_service.update_lesson(conn, lesson_id, payload)


@router.delete(
    "/lessons/{lesson_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Lesson not found", "model": ErrorResponse}},
    summary="Delete a lesson",
)
async def delete_lesson(lesson_id: ResourceId, conn: AsyncConnection = Depends(get_db_connection)):
    await lesson_service.delete_lesson(conn, lesson_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/report",
    response_model=LessonReportResponse,
    summary="Lessons grouped by subject",
    description="Every lesson with its subject name, ordered by subject name then title.",
)
async def lessons_report(conn: AsyncConnection = Depends(get_db_connection)):
    return LessonReportResponse(data=await lesson_service.lessons_by_subject(conn))
