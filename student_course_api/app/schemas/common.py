"""Shared response models: errors, enrollments and detail envelopes."""

from typing import List

from pydantic import BaseModel, Field

from .course import CourseRead
from .student import StudentRead


class ErrorResponse(BaseModel):
    """Body returned for every error response."""

    error: str = Field(..., examples=["Not Found"])


class EnrollmentRead(BaseModel):
    """A single student/course enrollment."""

    student_id: int = Field(..., examples=[1])
    course_id: int = Field(..., examples=[1])


class StudentDetail(BaseModel):
    """A student together with the courses they are enrolled in."""

    student: StudentRead
    courses: List[CourseRead]


class CourseDetail(BaseModel):
    """A course together with its enrolled students."""

    course: CourseRead
    students: List[StudentRead]
