"""
Pydantic models for student data.

Required fields on ``StudentCreate`` are declared optional so that the
service can reject missing values with its own message instead of a
generic schema error.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class StudentBase(BaseModel):
    name: str = Field(..., examples=["Alice"])
    email: str = Field(..., examples=["alice@example.com"])


class StudentCreate(BaseModel):
    """Schema for creating a student.  Both fields are required."""

    name: Optional[str] = Field(None, examples=["Alice"])
    email: Optional[str] = Field(None, examples=["alice@example.com"])


class StudentUpdate(BaseModel):
    """Schema for updating a student.

    All fields are optional; only provided, non-empty values will be
    updated.
    """

    name: Optional[str] = None
    email: Optional[str] = None


class StudentRead(StudentBase):
    """Schema for reading a student from the API."""

    id: int = Field(..., examples=[1])

    model_config = {
        "from_attributes": True,
    }


class StudentPage(BaseModel):
    """One page of a filtered student listing."""

    items: List[StudentRead]
    total: int = Field(..., description="Number of students matching the filters")
