"""
Unit tests for the in-memory store
"""
import pytest

from student_course_api.app.core.exceptions import (
    AlreadyEnrolledError,
    CourseFullError,
    DuplicateEmailError,
    EnrollmentConflictError,
    NotFoundError,
    UnknownCollectionError,
)
from student_course_api.app.core.store import COURSES, STUDENTS, InMemoryStore


class TestSeedAndReset:
    def test_seed_loads_three_students_and_three_courses(self, store):
        assert len(store.list(STUDENTS)) == 3
        assert len(store.list(COURSES)) == 3
        assert store.list(STUDENTS)[0]["name"] == "Alice"
        assert store.list(COURSES)[0]["title"] == "Math"

    def test_seed_twice_still_yields_three_of_each(self, store):
        store.create(STUDENTS, {"name": "David", "email": "david@example.com"})
        store.seed()
        assert len(store.list(STUDENTS)) == 3
        assert len(store.list(COURSES)) == 3

    def test_reset_empties_collections_and_restarts_ids(self, store):
        store.enroll(1, 1)
        store.reset()
        assert store.list(STUDENTS) == []
        assert store.list(COURSES) == []
        assert store.get_course_students(1) == []
        created = store.create(STUDENTS, {"name": "Zoe", "email": "zoe@example.com"})
        assert created["id"] == 1

    def test_fresh_store_is_empty(self):
        assert InMemoryStore().list(STUDENTS) == []


class TestCollections:
    def test_create_student_assigns_next_id(self, store):
        created = store.create(STUDENTS, {"name": "David", "email": "david@example.com"})
        assert created == {"id": 4, "name": "David", "email": "david@example.com"}
        assert len(store.list(STUDENTS)) == 4

    def test_caller_supplied_id_is_ignored(self, store):
        created = store.create(STUDENTS, {"id": 99, "name": "Zoe", "email": "zoe@example.com"})
        assert created["id"] == 4
        assert store.get(STUDENTS, 4) is created
        assert store.get(STUDENTS, 99) is None

    def test_duplicate_student_email_rejected(self, store):
        with pytest.raises(DuplicateEmailError) as exc_info:
            store.create(STUDENTS, {"name": "Eve", "email": "alice@example.com"})
        assert exc_info.value.message == "Email must be unique"
        assert len(store.list(STUDENTS)) == 3

    def test_duplicate_course_title_accepted_on_create(self, store):
        created = store.create(COURSES, {"title": "Math", "teacher": "Someone"})
        assert created["id"] == 4
        assert [c["title"] for c in store.list(COURSES)].count("Math") == 2

    def test_get_returns_live_reference(self, store):
        student = store.get(STUDENTS, 1)
        student["name"] = "Alicia"
        assert store.get(STUDENTS, 1)["name"] == "Alicia"

    def test_get_unknown_id_returns_none(self, store):
        assert store.get(STUDENTS, 999) is None

    def test_list_filters_by_substring(self, store):
        names = [s["name"] for s in store.list(STUDENTS, {"name": "li"})]
        assert names == ["Alice", "Charlie"]

    def test_list_filters_are_case_sensitive(self, store):
        assert store.list(STUDENTS, {"name": "alice"}) == []

    def test_list_ignores_empty_filters(self, store):
        assert len(store.list(COURSES, {"title": "", "teacher": None})) == 3

    def test_list_combines_filters(self, store):
        courses = store.list(COURSES, {"title": "s", "teacher": "Mr."})
        assert [c["title"] for c in courses] == ["History"]

    def test_unknown_collection(self, store):
        with pytest.raises(UnknownCollectionError):
            store.list("teachers")

    def test_remove_student(self, store):
        assert store.remove(STUDENTS, 1) is True
        assert store.get(STUDENTS, 1) is None

    def test_remove_unknown_returns_false(self, store):
        assert store.remove(STUDENTS, 999) is False
        assert store.remove(COURSES, 999) is False

    def test_remove_enrolled_student_rejected(self, store):
        store.enroll(1, 1)
        with pytest.raises(EnrollmentConflictError) as exc_info:
            store.remove(STUDENTS, 1)
        assert exc_info.value.message == "Cannot delete student: enrolled in a course"
        assert store.get(STUDENTS, 1) is not None

    def test_remove_course_drops_its_enrollments(self, store):
        store.enroll(1, 1)
        assert store.remove(COURSES, 1) is True
        assert store.get_student_courses(1) == []
        assert store.remove(STUDENTS, 1) is True


class TestEnrollment:
    def test_enroll_returns_relation(self, store):
        assert store.enroll(1, 2) == {"student_id": 1, "course_id": 2}
        assert store.get_course_students(2) == [store.get(STUDENTS, 1)]

    def test_fourth_student_rejected_when_course_full(self, store):
        store.create(STUDENTS, {"name": "Extra", "email": "extra@example.com"})
        for student_id in (1, 2, 3):
            store.enroll(student_id, 1)
        with pytest.raises(CourseFullError) as exc_info:
            store.enroll(4, 1)
        assert exc_info.value.message == "Course is full"
        assert store.enrollment_count(1) == 3

    def test_capacity_is_configurable(self):
        store = InMemoryStore(course_capacity=1)
        store.seed()
        store.enroll(1, 1)
        with pytest.raises(CourseFullError):
            store.enroll(2, 1)

    def test_enroll_twice_rejected(self, store):
        store.enroll(1, 1)
        with pytest.raises(AlreadyEnrolledError):
            store.enroll(1, 1)

    def test_enroll_unknown_student(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.enroll(999, 1)
        assert exc_info.value.message == "Student not found"

    def test_enroll_unknown_course(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.enroll(1, 999)
        assert exc_info.value.message == "Course not found"

    def test_unenroll(self, store):
        store.enroll(1, 1)
        assert store.unenroll(1, 1) is True
        assert store.is_enrolled(1) is False
        assert store.unenroll(1, 1) is False

    def test_unenroll_frees_a_seat(self, store):
        store.create(STUDENTS, {"name": "Extra", "email": "extra@example.com"})
        for student_id in (1, 2, 3):
            store.enroll(student_id, 1)
        store.unenroll(2, 1)
        store.enroll(4, 1)
        assert [s["id"] for s in store.get_course_students(1)] == [1, 3, 4]

    def test_student_courses_in_enrollment_order(self, store):
        store.enroll(1, 2)
        store.enroll(1, 1)
        assert [c["id"] for c in store.get_student_courses(1)] == [2, 1]
