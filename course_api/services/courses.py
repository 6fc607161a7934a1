"""Course service and serialisation helpers."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from ..core.time import as_utc, isoformat_utc, utcnow
from ..models import Course, CourseCreate, CourseType
from ..repositories import CourseRepository
from .validation import CourseValidationError, validate_course

logger = logging.getLogger(__name__)

RECENT_COURSES_LIMIT = 5


class CourseErrorKind(str, Enum):
    VALIDATION = "validation"
    PERSISTENCE = "persistence"


@dataclass
class AddCourseResult:
    """Outcome of :meth:`CourseService.add_course`."""

    course: Optional[Course] = None
    error_kind: Optional[CourseErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None and self.course is not None


class CourseService:
    """Validates, stores and queries courses through a repository."""

    def __init__(self, repository: CourseRepository) -> None:
        self.repository = repository

    def add_course(self, candidate: CourseCreate) -> AddCourseResult:
        """Validate ``candidate`` and persist it as a new course.

        The stored course always gets a fresh id and an ``added_on`` of now.
        Validation failures never reach the repository; a repository that
        reports failure yields a persistence result with no course.
        """

        try:
            course_type = validate_course(candidate)
        except CourseValidationError as exc:
            return AddCourseResult(
                error_kind=CourseErrorKind.VALIDATION, message=str(exc)
            )

        course = Course(
            id=uuid.uuid4(),
            title=candidate.title,
            description=candidate.description,
            course_code=candidate.course_code,
            type=course_type,
            added_on=utcnow(),
        )
        if not self.repository.insert(course):
            logger.warning("Repository rejected course %s", course.id)
            return AddCourseResult(error_kind=CourseErrorKind.PERSISTENCE)
        return AddCourseResult(course=course)

    def get_all_courses(self) -> List[Course]:
        return self.repository.find_all()

    def get_recent_top5(self) -> List[Course]:
        """Five most recently added courses, presented in title order."""

        courses = self.repository.find_all()
        recent = sorted(courses, key=lambda c: as_utc(c.added_on), reverse=True)
        return sorted(recent[:RECENT_COURSES_LIMIT], key=lambda c: c.title)


def course_to_dict(course: Course) -> Dict[str, Any]:
    """Serialise a course model to API-friendly dict."""

    return {
        "id": str(course.id),
        "title": course.title,
        "description": course.description,
        "course_code": course.course_code,
        "type": CourseType(course.type).value,
        "added_on": isoformat_utc(course.added_on),
    }


def course_summary_to_dict(course: Course) -> Dict[str, Any]:
    """Projection used by the recent-courses listing (no id or type)."""

    return {
        "title": course.title,
        "description": course.description,
        "course_code": course.course_code,
        "added_on": isoformat_utc(course.added_on),
    }


__all__ = [
    "AddCourseResult",
    "CourseErrorKind",
    "CourseService",
    "RECENT_COURSES_LIMIT",
    "course_summary_to_dict",
    "course_to_dict",
]
