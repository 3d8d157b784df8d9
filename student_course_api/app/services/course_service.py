"""
Business logic for courses and enrollments.

Course titles are only required to be unique when a course is renamed;
creating a course with an existing title is accepted.  Deleting a
course is never blocked by its enrollments: they are dropped together
with the course.

Enrollment is capacity bounded (see ``InMemoryStore.course_capacity``);
a full course answers ``CourseFullError``.
"""

import logging
from typing import Optional

from student_course_api.app.core.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from student_course_api.app.core.store import COURSES, InMemoryStore
from student_course_api.app.schemas.common import CourseDetail, EnrollmentRead
from student_course_api.app.schemas.course import (
    CourseCreate,
    CoursePage,
    CourseRead,
    CourseUpdate,
)
from student_course_api.app.schemas.student import StudentRead
from student_course_api.app.services.pagination import paginate

logger = logging.getLogger(__name__)


class CourseService:
    """Service class for managing courses and their enrollments."""

    @classmethod
    async def list_courses(
        cls,
        store: InMemoryStore,
        title: Optional[str] = None,
        teacher: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> CoursePage:
        """Return one page of courses whose title and teacher contain the filters."""
        courses = store.list(COURSES, {"title": title, "teacher": teacher})
        items, total = paginate(courses, page, limit)
        return CoursePage(items=[CourseRead(**c) for c in items], total=total)

    @classmethod
    async def get_course(cls, store: InMemoryStore, course_id: int) -> CourseDetail:
        """Return a course along with its enrolled students."""
        course = cls._get_or_404(store, course_id)
        students = store.get_course_students(course_id)
        return CourseDetail(
            course=CourseRead(**course),
            students=[StudentRead(**s) for s in students],
        )

    @classmethod
    async def create_course(cls, store: InMemoryStore, data: CourseCreate) -> CourseRead:
        # Duplicate titles are accepted here.
        if not data.title or not data.teacher:
            raise ValidationError("title and teacher required")
        course = store.create(COURSES, {"title": data.title, "teacher": data.teacher})
        logger.info("Created course %s '%s'", course["id"], course["title"])
        return CourseRead(**course)

    @classmethod
    async def update_course(
        cls, store: InMemoryStore, course_id: int, data: CourseUpdate
    ) -> CourseRead:
        """Apply a partial update.

        Renaming a course to a title held by a different course raises
        ``ConflictError``; keeping its own title is allowed.
        """
        course = cls._get_or_404(store, course_id)
        if data.title:
            owner = store.find_by(COURSES, "title", data.title)
            if owner is not None and owner["id"] != course["id"]:
                raise ConflictError("Course title must be unique")
            course["title"] = data.title
        if data.teacher:
            course["teacher"] = data.teacher
        logger.info("Updated course %s", course_id)
        return CourseRead(**course)

    @classmethod
    async def delete_course(cls, store: InMemoryStore, course_id: int) -> None:
        if not store.remove(COURSES, course_id):
            raise NotFoundError("Course not found")
        logger.info("Deleted course %s", course_id)

    @classmethod
    async def enroll_student(
        cls, store: InMemoryStore, course_id: int, student_id: int
    ) -> EnrollmentRead:
        enrollment = store.enroll(student_id, course_id)
        logger.info("Enrolled student %s in course %s", student_id, course_id)
        return EnrollmentRead(**enrollment)

    @classmethod
    async def unenroll_student(cls, store: InMemoryStore, course_id: int, student_id: int) -> None:
        if not store.unenroll(student_id, course_id):
            raise NotFoundError("Enrollment not found")
        logger.info("Unenrolled student %s from course %s", student_id, course_id)

    @staticmethod
    def _get_or_404(store: InMemoryStore, course_id: int) -> dict:
        course = store.get(COURSES, course_id)
        if course is None:
            raise NotFoundError("Course not found")
        return course
