"""FastAPI dependency wiring."""

from __future__ import annotations

from fastapi import Depends
from sqlmodel import Session

from ..core import get_session
from ..repositories import SqlCourseRepository
from ..services import CourseService


def get_course_service(session: Session = Depends(get_session)) -> CourseService:
    """Build a request-scoped course service."""

    return CourseService(SqlCourseRepository(session))


__all__ = ["get_course_service"]
