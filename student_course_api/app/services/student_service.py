"""
Business logic for students.

``StudentService`` filters and paginates the student collection,
validates payloads and enforces email uniqueness on update (the store
enforces it on creation).  Deleting a student that is still enrolled in
a course is refused by the store with ``EnrollmentConflictError``.
"""

import logging
from typing import Optional

from student_course_api.app.core.exceptions import (
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from student_course_api.app.core.store import STUDENTS, InMemoryStore
from student_course_api.app.schemas.common import StudentDetail
from student_course_api.app.schemas.course import CourseRead
from student_course_api.app.schemas.student import (
    StudentCreate,
    StudentPage,
    StudentRead,
    StudentUpdate,
)
from student_course_api.app.services.pagination import paginate

logger = logging.getLogger(__name__)


class StudentService:
    """Service class for managing students."""

    @classmethod
    async def list_students(
        cls,
        store: InMemoryStore,
        name: Optional[str] = None,
        email: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> StudentPage:
        """Return one page of students whose name and email contain the filters.

        ``total`` is the number of students matching the filters, not
        the size of the returned page.
        """
        students = store.list(STUDENTS, {"name": name, "email": email})
        items, total = paginate(students, page, limit)
        return StudentPage(items=[StudentRead(**s) for s in items], total=total)

    @classmethod
    async def get_student(cls, store: InMemoryStore, student_id: int) -> StudentDetail:
        """Return a student along with the courses they are enrolled in."""
        student = cls._get_or_404(store, student_id)
        courses = store.get_student_courses(student_id)
        return StudentDetail(
            student=StudentRead(**student),
            courses=[CourseRead(**c) for c in courses],
        )

    @classmethod
    async def create_student(cls, store: InMemoryStore, data: StudentCreate) -> StudentRead:
        if not data.name or not data.email:
            raise ValidationError("name and email required")
        student = store.create(STUDENTS, {"name": data.name, "email": data.email})
        logger.info("Created student %s <%s>", student["id"], student["email"])
        return StudentRead(**student)

    @classmethod
    async def update_student(
        cls, store: InMemoryStore, student_id: int, data: StudentUpdate
    ) -> StudentRead:
        """Apply a partial update.

        Empty or missing fields are left unchanged.  Changing the email
        to one already used by another student raises
        ``DuplicateEmailError``.
        """
        student = cls._get_or_404(store, student_id)
        if data.email:
            owner = store.find_by(STUDENTS, "email", data.email)
            if owner is not None and owner["id"] != student["id"]:
                raise DuplicateEmailError()
        if data.name:
            student["name"] = data.name
        if data.email:
            student["email"] = data.email
        logger.info("Updated student %s", student_id)
        return StudentRead(**student)

    @classmethod
    async def delete_student(cls, store: InMemoryStore, student_id: int) -> None:
        if not store.remove(STUDENTS, student_id):
            raise NotFoundError("Student not found")
        logger.info("Deleted student %s", student_id)

    @staticmethod
    def _get_or_404(store: InMemoryStore, student_id: int) -> dict:
        student = store.get(STUDENTS, student_id)
        if student is None:
            raise NotFoundError("Student not found")
        return student
