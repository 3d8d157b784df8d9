"""
Student endpoints for API v1.

CRUD routes for students.  Listing supports case‑sensitive substring
filters on ``name`` and ``email`` plus page/limit pagination.  Fetching
a single student also returns the courses they are enrolled in.  A
student that is still enrolled in a course cannot be deleted.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from student_course_api.app.core.store import InMemoryStore, get_store
from student_course_api.app.schemas.common import ErrorResponse, StudentDetail
from student_course_api.app.schemas.student import (
    StudentCreate,
    StudentPage,
    StudentRead,
    StudentUpdate,
)
from student_course_api.app.services.student_service import StudentService

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Student not found"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid parameters or duplicate email"}}


@router.get("", response_model=StudentPage)
async def list_students(
    name: Optional[str] = Query(None, description="Filter by name (partial, case sensitive)"),
    email: Optional[str] = Query(None, description="Filter by email (partial, case sensitive)"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    store: InMemoryStore = Depends(get_store),
) -> StudentPage:
    """List students with filtering and pagination.

    ``total`` counts every student matching the filters, regardless of
    the requested page.
    """
    return await StudentService.list_students(store, name=name, email=email, page=page, limit=limit)


@router.get("/{student_id}", response_model=StudentDetail, responses=NOT_FOUND)
async def get_student(student_id: int, store: InMemoryStore = Depends(get_store)) -> StudentDetail:
    """Retrieve a student and the courses they are enrolled in."""
    return await StudentService.get_student(store, student_id)


@router.post(
    "",
    response_model=StudentRead,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_student(
    student_in: StudentCreate,
    store: InMemoryStore = Depends(get_store),
) -> StudentRead:
    """Create a student.  ``name`` and ``email`` are required; emails are unique."""
    return await StudentService.create_student(store, student_in)


@router.put("/{student_id}", response_model=StudentRead, responses={**BAD_REQUEST, **NOT_FOUND})
async def update_student(
    student_id: int,
    student_in: StudentUpdate,
    store: InMemoryStore = Depends(get_store),
) -> StudentRead:
    """Partially update a student."""
    return await StudentService.update_student(store, student_id, student_in)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"model": ErrorResponse, "description": "Student is enrolled in a course"},
        **NOT_FOUND,
    },
)
async def delete_student(student_id: int, store: InMemoryStore = Depends(get_store)) -> Response:
    """Delete a student that is not enrolled in any course."""
    await StudentService.delete_student(store, student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
