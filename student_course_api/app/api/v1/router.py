"""
Top‑level router for version 1 of the API.

Aggregates the resource routers.  Enrollment routes live on the
courses router under ``/courses/{course_id}/students/{student_id}``.
"""

from fastapi import APIRouter

from .endpoints import courses, students

router = APIRouter()

router.include_router(students.router, prefix="/students", tags=["students"])
router.include_router(courses.router, prefix="/courses", tags=["courses"])
