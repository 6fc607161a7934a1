"""Course storage port backed by SQLModel."""

from __future__ import annotations

import logging
from typing import List, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..models import Course

logger = logging.getLogger(__name__)


class CourseRepository(Protocol):
    """Append-only course storage."""

    def insert(self, course: Course) -> bool:
        """Persist ``course``; ``True`` only if the row was committed."""
        ...

    def find_all(self) -> List[Course]:
        """Return every stored course, unordered."""
        ...


class SqlCourseRepository:
    """``CourseRepository`` over a request-scoped session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def insert(self, course: Course) -> bool:
        try:
            self.session.add(course)
            self.session.commit()
            self.session.refresh(course)
        except SQLAlchemyError:
            self.session.rollback()
            logger.exception("Could not persist course %s", course.id)
            return False
        return True

    def find_all(self) -> List[Course]:
        return list(self.session.exec(select(Course)).all())


__all__ = ["CourseRepository", "SqlCourseRepository"]
