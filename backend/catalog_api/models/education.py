"""
Catalog Backend: Education Edition Models
==========================================

What:  School subjects (`subjects`) and lessons (`lessons`).
Who:   Used by education_service.py and Alembic.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database import Base


class Subject(Base):
    """A school subject (Math, History, ...). Read-only."""

    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Subject(id={self.id}, name='{self.name}')>"


class Lesson(Base):
    """A lesson plan; only title and subject are mandatory."""

    __tablename__ = "lessons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    subject_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("subjects.id"), nullable=False
    )
    target_age_group: Mapped[str | None] = mapped_column(String(50), nullable=True)
    content_url: Mapped[str | None] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Lesson(id={self.id}, title='{self.title}', subject_id={self.subject_id})>"
