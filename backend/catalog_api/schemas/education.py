"""
Catalog Backend: Education Edition Schemas
===========================================

What:  Payloads and responses for /api/education.

The education frontend expects list endpoints wrapped in a `data` key, so
subjects, lessons and the report are returned as {"data": [...]}.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from catalog_api.schemas.common import MAX_ID


class SubjectResponse(BaseModel):
    id: int = Field(description="Subject identifier")
    name: str = Field(description="Subject name")


class LessonPayload(BaseModel):
    """
    What:  Body of POST /api/education/lessons and PUT /api/education/lessons/{id}.
    Rules: title and subject_id are required; the rest is optional.
    """
    title: str = Field(min_length=1, description="Lesson title")
    description: Optional[str] = Field(default=None, description="Lesson summary")
    subject_id: int = Field(gt=0, le=MAX_ID, description="Subject identifier (subjects.id)")
    target_age_group: Optional[str] = Field(default=None, description="e.g. '8-10'")
    content_url: Optional[str] = Field(default=None, description="Link to the lesson world/content")


class LessonResponse(LessonPayload):
    id: int = Field(description="Lesson identifier")


class LessonReportItem(BaseModel):
    """One row of the lessons-by-subject report."""
    id: int
    title: str
    description: Optional[str] = None
    target_age_group: Optional[str] = None
    subject_name: str = Field(description="Joined subjects.name")


class SubjectListResponse(BaseModel):
    data: List[SubjectResponse]


class LessonListResponse(BaseModel):
    data: List[LessonResponse]


class LessonReportResponse(BaseModel):
    data: List[LessonReportItem]
