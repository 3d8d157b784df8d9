"""
In‑memory storage for students, courses and enrollments.

``InMemoryStore`` owns two collections (``students`` and ``courses``)
and the enrollment relation between them.  Records are plain
dictionaries; ``get`` returns the stored dictionary itself so callers
can apply partial updates in place.  The store enforces:

* unique student emails on creation,
* a capacity limit on the number of students per course,
* that a student cannot be removed while enrolled in any course.

Course titles are not checked for uniqueness on creation; the course
service enforces it on update only.  Removing a course drops its
enrollments instead of being blocked by them.

There is no module level store.  ``create_app`` attaches an instance to
``app.state.store`` and routes obtain it through the ``get_store``
dependency, so every application (and every test) has its own data.
"""

import logging
from typing import Dict, List, Optional, Tuple

from fastapi import Request

from .exceptions import (
    AlreadyEnrolledError,
    CourseFullError,
    DuplicateEmailError,
    EnrollmentConflictError,
    NotFoundError,
    UnknownCollectionError,
)

logger = logging.getLogger(__name__)

STUDENTS = "students"
COURSES = "courses"

DEFAULT_COURSE_CAPACITY = 3

SEED_STUDENTS: List[Dict[str, str]] = [
    {"name": "Alice", "email": "alice@example.com"},
    {"name": "Bob", "email": "bob@example.com"},
    {"name": "Charlie", "email": "charlie@example.com"},
]

SEED_COURSES: List[Dict[str, str]] = [
    {"title": "Math", "teacher": "Mr. Smith"},
    {"title": "Physics", "teacher": "Mrs. Johnson"},
    {"title": "History", "teacher": "Mr. Brown"},
]


class InMemoryStore:
    """Process‑lifetime storage for the academic records."""

    def __init__(self, course_capacity: int = DEFAULT_COURSE_CAPACITY) -> None:
        self.course_capacity = course_capacity
        self._collections: Dict[str, Dict[int, dict]] = {}
        self._next_ids: Dict[str, int] = {}
        # (student_id, course_id) pairs in enrollment order
        self._enrollments: List[Tuple[int, int]] = []
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Drop every record and restart id counters at 1."""
        self._collections = {STUDENTS: {}, COURSES: {}}
        self._next_ids = {STUDENTS: 1, COURSES: 1}
        self._enrollments = []

    def seed(self) -> None:
        """Replace the current contents with the demo dataset."""
        self.reset()
        for student in SEED_STUDENTS:
            self.create(STUDENTS, student)
        for course in SEED_COURSES:
            self.create(COURSES, course)
        logger.debug(
            "Seeded store with %d students and %d courses",
            len(SEED_STUDENTS),
            len(SEED_COURSES),
        )

    # ------------------------------------------------------------------
    # Generic collection access
    # ------------------------------------------------------------------
    def _collection(self, collection: str) -> Dict[int, dict]:
        try:
            return self._collections[collection]
        except KeyError:
            raise UnknownCollectionError(collection) from None

    def list(self, collection: str, filters: Optional[Dict[str, Optional[str]]] = None) -> List[dict]:
        """Return records of ``collection`` in insertion order.

        ``filters`` maps a field name to a substring that must be
        contained in that field (case sensitive).  Empty values are
        ignored.
        """
        records = list(self._collection(collection).values())
        for field, needle in (filters or {}).items():
            if needle:
                records = [r for r in records if needle in str(r.get(field, ""))]
        return records

    def get(self, collection: str, record_id: int) -> Optional[dict]:
        """Return the stored record or ``None``."""
        return self._collection(collection).get(record_id)

    def create(self, collection: str, fields: dict) -> dict:
        """Insert a new record and return it.

        Raises ``DuplicateEmailError`` when creating a student whose
        email is already taken.
        """
        records = self._collection(collection)
        if collection == STUDENTS and self.find_by(STUDENTS, "email", fields.get("email")):
            raise DuplicateEmailError()
        record_id = self._next_ids[collection]
        self._next_ids[collection] = record_id + 1
        # The assigned id always wins over a caller supplied one.
        record = {**fields, "id": record_id}
        records[record_id] = record
        return record

    def remove(self, collection: str, record_id: int) -> bool:
        """Delete a record.

        Returns ``False`` if no such record exists.  Students with an
        active enrollment cannot be removed (``EnrollmentConflictError``).
        Removing a course also removes its enrollments.
        """
        records = self._collection(collection)
        if record_id not in records:
            return False
        if collection == STUDENTS and self.is_enrolled(record_id):
            raise EnrollmentConflictError()
        if collection == COURSES:
            self._enrollments = [e for e in self._enrollments if e[1] != record_id]
        del records[record_id]
        return True

    def find_by(self, collection: str, field: str, value) -> Optional[dict]:
        """Return the first record whose ``field`` equals ``value``."""
        for record in self._collection(collection).values():
            if record.get(field) == value:
                return record
        return None

    # ------------------------------------------------------------------
    # Enrollment
    # ------------------------------------------------------------------
    def enroll(self, student_id: int, course_id: int) -> dict:
        """Enroll a student into a course and return the relation."""
        if self.get(STUDENTS, student_id) is None:
            raise NotFoundError("Student not found")
        if self.get(COURSES, course_id) is None:
            raise NotFoundError("Course not found")
        if (student_id, course_id) in self._enrollments:
            raise AlreadyEnrolledError()
        if self.enrollment_count(course_id) >= self.course_capacity:
            raise CourseFullError()
        self._enrollments.append((student_id, course_id))
        return {"student_id": student_id, "course_id": course_id}

    def unenroll(self, student_id: int, course_id: int) -> bool:
        """Remove an enrollment; ``True`` if it existed."""
        pair = (student_id, course_id)
        if pair not in self._enrollments:
            return False
        self._enrollments.remove(pair)
        return True

    def is_enrolled(self, student_id: int) -> bool:
        return any(s == student_id for s, _ in self._enrollments)

    def enrollment_count(self, course_id: int) -> int:
        return sum(1 for _, c in self._enrollments if c == course_id)

    def get_student_courses(self, student_id: int) -> List[dict]:
        courses = self._collections[COURSES]
        return [courses[c] for s, c in self._enrollments if s == student_id]

    def get_course_students(self, course_id: int) -> List[dict]:
        students = self._collections[STUDENTS]
        return [students[s] for s, c in self._enrollments if c == course_id]


def get_store(request: Request) -> InMemoryStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
