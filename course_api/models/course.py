"""Database model and request shape for course entities."""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import Column, Enum as SAEnum
from sqlmodel import Field as ORMField, SQLModel


class CourseType(str, Enum):
    """Course visibility, serialized title-cased."""

    PUBLIC = "Public"
    PRIVATE = "Private"


class CourseCreate(SQLModel):
    """Inbound course candidate.

    ``id`` and ``added_on`` are server-assigned; if a client sends them they are
    dropped with any other unknown field.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    course_code: str
    type: Optional[str] = CourseType.PUBLIC.value


class Course(SQLModel, table=True):
    """Persisted course, append-only."""

    __tablename__ = "courses"

    id: uuid.UUID = ORMField(default_factory=uuid.uuid4, primary_key=True)
    title: str
    description: str
    course_code: str = ORMField(index=True)
    type: CourseType = ORMField(
        default=CourseType.PUBLIC,
        sa_column=Column(
            SAEnum(
                CourseType,
                name="course_type",
                values_callable=lambda members: [member.value for member in members],
            ),
            nullable=False,
        ),
    )
    added_on: datetime


__all__ = ["Course", "CourseCreate", "CourseType"]
