"""Validation rules for inbound course candidates."""

from __future__ import annotations

from typing import Optional

from ..models import CourseCreate, CourseType

MAX_TITLE_LENGTH = 200

INVALID_TYPE_MESSAGE = "Invalid course type. Must be either 'public' or 'private'."
TITLE_REQUIRED_MESSAGE = "Course title is required."
TITLE_TOO_LONG_MESSAGE = f"Course title must be {MAX_TITLE_LENGTH} characters or less."
DESCRIPTION_REQUIRED_MESSAGE = "Course description is required."


class CourseValidationError(ValueError):
    """Raised when a course candidate breaks a field rule."""


def parse_course_type(value: Optional[str]) -> CourseType:
    """Parse ``value`` case-insensitively into a :class:`CourseType`."""

    normalized = (value or "").strip().lower()
    for member in CourseType:
        if member.value.lower() == normalized:
            return member
    raise CourseValidationError(INVALID_TYPE_MESSAGE)


def validate_course(candidate: CourseCreate) -> CourseType:
    """Check ``candidate`` and return its canonical type.

    Rules run in a fixed order so the first broken one decides the message:
    type, title presence, title length, description presence.
    """

    course_type = parse_course_type(candidate.type)

    title = candidate.title
    if not title or not title.strip():
        raise CourseValidationError(TITLE_REQUIRED_MESSAGE)
    if len(title) > MAX_TITLE_LENGTH:
        raise CourseValidationError(TITLE_TOO_LONG_MESSAGE)

    description = candidate.description
    if not description or not description.strip():
        raise CourseValidationError(DESCRIPTION_REQUIRED_MESSAGE)

    return course_type


__all__ = [
    "CourseValidationError",
    "DESCRIPTION_REQUIRED_MESSAGE",
    "INVALID_TYPE_MESSAGE",
    "MAX_TITLE_LENGTH",
    "TITLE_REQUIRED_MESSAGE",
    "TITLE_TOO_LONG_MESSAGE",
    "parse_course_type",
    "validate_course",
]
