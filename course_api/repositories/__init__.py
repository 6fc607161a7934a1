"""Storage ports and their implementations."""

from .courses import CourseRepository, SqlCourseRepository

__all__ = ["CourseRepository", "SqlCourseRepository"]
