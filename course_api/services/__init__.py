"""Service layer helpers."""

from .courses import (
    AddCourseResult,
    CourseErrorKind,
    CourseService,
    course_summary_to_dict,
    course_to_dict,
)
from .validation import CourseValidationError, parse_course_type, validate_course

__all__ = [
    "AddCourseResult",
    "CourseErrorKind",
    "CourseService",
    "CourseValidationError",
    "course_summary_to_dict",
    "course_to_dict",
    "parse_course_type",
    "validate_course",
]
