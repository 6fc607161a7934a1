"""Course management endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...models import CourseCreate
from ...services import (
    CourseErrorKind,
    CourseService,
    course_summary_to_dict,
    course_to_dict,
)
from ..deps import get_course_service
from ..errors import problem_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["courses"])

ADD_FAILED_MESSAGE = "Failed to add course"


@router.post(
    "/courses",
    name="AddCourse",
    summary="Adds a new course",
    description=(
        "Adds a new course to the system. The course title and description must "
        "not be empty. The title must be 200 characters or less. The course type "
        "must be either 'public' or 'private' (case-insensitive)."
    ),
)
def add_course(body: CourseCreate, service: CourseService = Depends(get_course_service)):
    logger.info("Adding new course: %s", body.title)
    try:
        result = service.add_course(body)
    except Exception as exc:
        logger.exception("Error adding course")
        return problem_response(str(exc))

    if result.error_kind is CourseErrorKind.VALIDATION:
        logger.warning("Invalid course data: %s", result.message)
        return JSONResponse(status_code=400, content={"message": result.message})
    if not result.ok:
        logger.warning("Failed to add course: %s", body.title)
        return JSONResponse(status_code=400, content={"message": ADD_FAILED_MESSAGE})

    logger.info("Course added successfully: %s", result.course.title)
    return {"message": "Course added successfully", "course_id": str(result.course.id)}


@router.get(
    "/courses",
    name="GetAllCourses",
    summary="Retrieves all courses",
    description="Gets a list of all courses in the system.",
)
def list_courses(service: CourseService = Depends(get_course_service)):
    logger.info("Retrieving courses")
    try:
        courses = service.get_all_courses()
    except Exception as exc:
        logger.exception("Error retrieving courses")
        return problem_response(str(exc))

    logger.info("Retrieved %d courses", len(courses))
    return [course_to_dict(course) for course in courses]


@router.get(
    "/courses/top5",
    name="GetTop5Courses",
    summary="Retrieves top 5 recently added courses",
    description=(
        "Gets a list of the 5 most recently added courses, ordered by title. The "
        "response includes the course title, description, course code, and the "
        "date it was added."
    ),
)
def list_recent_courses(service: CourseService = Depends(get_course_service)):
    logger.info("Retrieving top 5 recently added courses")
    try:
        courses = service.get_recent_top5()
    except Exception as exc:
        logger.exception("Error retrieving top 5 courses")
        return problem_response(str(exc))

    logger.info("Retrieved %d courses", len(courses))
    return [course_summary_to_dict(course) for course in courses]


__all__ = ["ADD_FAILED_MESSAGE", "router"]
