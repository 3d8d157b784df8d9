"""
Custom exceptions.

Application-specific exceptions carrying the HTTP status code they map
to.  The storage layer and the services raise these; the handlers in
``error_handlers`` turn them into ``{"error": message}`` responses.

Exception hierarchy::

    StudentCourseError (base, 500)
       ├── ValidationError (400)          missing or empty required field
       ├── ConflictError (400)            uniqueness / business rule
       │      ├── DuplicateEmailError
       │      ├── EnrollmentConflictError
       │      ├── CourseFullError
       │      └── AlreadyEnrolledError
       ├── NotFoundError (404)            unknown id or enrollment
       └── UnknownCollectionError (500)   programming error
"""

from typing import Optional


class StudentCourseError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(StudentCourseError):
    """A required field is missing from the request payload."""

    status_code = 400
    default_message = "Invalid request"


class ConflictError(StudentCourseError):
    """A uniqueness constraint or business rule blocks the operation."""

    status_code = 400
    default_message = "Conflict"


class DuplicateEmailError(ConflictError):
    default_message = "Email must be unique"


class EnrollmentConflictError(ConflictError):
    default_message = "Cannot delete student: enrolled in a course"


class CourseFullError(ConflictError):
    default_message = "Course is full"


class AlreadyEnrolledError(ConflictError):
    default_message = "Student already enrolled in course"


class NotFoundError(StudentCourseError):
    """The requested resource does not exist."""

    status_code = 404
    default_message = "Not Found"


class UnknownCollectionError(StudentCourseError):
    """Raised when the store is asked for a collection it does not own."""

    def __init__(self, collection: str) -> None:
        super().__init__(f"Unknown collection: {collection}")
        self.collection = collection
