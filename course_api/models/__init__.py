"""Database model exports."""

from .course import Course, CourseCreate, CourseType

__all__ = [
    "Course",
    "CourseCreate",
    "CourseType",
]
