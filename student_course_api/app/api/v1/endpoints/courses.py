"""
Course endpoints for API v1.

CRUD routes for courses plus enrollment management under
``/courses/{course_id}/students/{student_id}``.  Listing supports
case‑sensitive substring filters on ``title`` and ``teacher``.  Course
titles are checked for uniqueness on update only, and deleting a course
is allowed even while students are enrolled.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from student_course_api.app.core.store import InMemoryStore, get_store
from student_course_api.app.schemas.common import CourseDetail, EnrollmentRead, ErrorResponse
from student_course_api.app.schemas.course import (
    CourseCreate,
    CoursePage,
    CourseRead,
    CourseUpdate,
)
from student_course_api.app.services.course_service import CourseService

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Course not found"}}


@router.get("", response_model=CoursePage)
async def list_courses(
    title: Optional[str] = Query(None, description="Filter by title (partial, case sensitive)"),
    teacher: Optional[str] = Query(None, description="Filter by teacher (partial, case sensitive)"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    store: InMemoryStore = Depends(get_store),
) -> CoursePage:
    """List courses with filtering and pagination."""
    return await CourseService.list_courses(store, title=title, teacher=teacher, page=page, limit=limit)


@router.get("/{course_id}", response_model=CourseDetail, responses=NOT_FOUND)
async def get_course(course_id: int, store: InMemoryStore = Depends(get_store)) -> CourseDetail:
    """Retrieve a course and its enrolled students."""
    return await CourseService.get_course(store, course_id)


@router.post(
    "",
    response_model=CourseRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Missing title or teacher"}},
)
async def create_course(
    course_in: CourseCreate,
    store: InMemoryStore = Depends(get_store),
) -> CourseRead:
    """Create a course.  ``title`` and ``teacher`` are required."""
    return await CourseService.create_course(store, course_in)


@router.put(
    "/{course_id}",
    response_model=CourseRead,
    responses={400: {"model": ErrorResponse, "description": "Duplicate title"}, **NOT_FOUND},
)
async def update_course(
    course_id: int,
    course_in: CourseUpdate,
    store: InMemoryStore = Depends(get_store),
) -> CourseRead:
    """Partially update a course.  A new title must not belong to another course."""
    return await CourseService.update_course(store, course_id, course_in)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_course(course_id: int, store: InMemoryStore = Depends(get_store)) -> Response:
    """Delete a course together with its enrollments."""
    await CourseService.delete_course(store, course_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{course_id}/students/{student_id}",
    response_model=EnrollmentRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Course is full or student already enrolled"},
        404: {"model": ErrorResponse, "description": "Student or course not found"},
    },
)
async def enroll_student(
    course_id: int,
    student_id: int,
    store: InMemoryStore = Depends(get_store),
) -> EnrollmentRead:
    """Enroll a student into a course."""
    return await CourseService.enroll_student(store, course_id, student_id)


@router.delete(
    "/{course_id}/students/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "Enrollment not found"}},
)
async def unenroll_student(
    course_id: int,
    student_id: int,
    store: InMemoryStore = Depends(get_store),
) -> Response:
    """Remove a student from a course."""
    await CourseService.unenroll_student(store, course_id, student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
