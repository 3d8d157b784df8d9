"""
Pydantic models for course data.

Titles are only checked for uniqueness when a course is updated; see
``CourseService.update_course``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CourseBase(BaseModel):
    title: str = Field(..., examples=["Math"])
    teacher: str = Field(..., examples=["Mr. Smith"])


class CourseCreate(BaseModel):
    """Schema for creating a course.  Both fields are required."""

    title: Optional[str] = Field(None, examples=["Math"])
    teacher: Optional[str] = Field(None, examples=["Mr. Smith"])


class CourseUpdate(BaseModel):
    """Schema for updating a course.

    All fields are optional; only provided, non-empty values will be
    updated.
    """

    title: Optional[str] = None
    teacher: Optional[str] = None


class CourseRead(CourseBase):
    """Schema for reading a course from the API."""

    id: int = Field(..., examples=[1])

    model_config = {
        "from_attributes": True,
    }


class CoursePage(BaseModel):
    """One page of a filtered course listing."""

    items: List[CourseRead]
    total: int = Field(..., description="Number of courses matching the filters")
