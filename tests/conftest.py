import os
from datetime import datetime, timedelta, timezone
from typing import List

import pytest

# Point the app at an in-memory store before anything imports the engine.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "development"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from course_api.app import app  # noqa: E402
from course_api.core import engine  # noqa: E402
from course_api.models import Course, CourseType  # noqa: E402


BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class InMemoryCourseRepository:
    """List-backed repository for service tests."""

    def __init__(self, courses: List[Course] | None = None, accept: bool = True):
        self.courses: List[Course] = list(courses or [])
        self.accept = accept
        self.insert_calls = 0

    def insert(self, course: Course) -> bool:
        self.insert_calls += 1
        if not self.accept:
            return False
        self.courses.append(course)
        return True

    def find_all(self) -> List[Course]:
        return list(self.courses)


class BrokenCourseRepository:
    """Repository whose store is unreachable."""

    def insert(self, course: Course) -> bool:
        raise RuntimeError("store unavailable")

    def find_all(self) -> List[Course]:
        raise RuntimeError("store unavailable")


def make_course(title: str, minutes: int, **overrides) -> Course:
    """Build a stored course added ``minutes`` after ``BASE_TIME``."""

    fields = {
        "title": title,
        "description": f"About {title}",
        "course_code": f"C-{title}",
        "type": CourseType.PUBLIC,
        "added_on": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return Course(**fields)


@pytest.fixture
def db_engine():
    """Fresh ``courses`` table for each test."""

    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def client(db_engine):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_course_data():
    """Sample course creation payload"""
    return {
        "title": "Intro to Python",
        "description": "Variables, loops and functions.",
        "course_code": "PY101",
        "type": "public",
    }
