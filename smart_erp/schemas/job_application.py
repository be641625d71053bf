"""Recruitment schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

ApplicationStatus = Literal["Applied", "Interview", "Hired"]


class JobApplicationCreate(BaseModel):
    """Submit a job application."""

    candidate_name: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    status: ApplicationStatus = "Applied"
    resume_link: str = Field(..., min_length=1, max_length=500)


class JobApplicationUpdate(BaseModel):
    """Update a job application."""

    candidate_name: str | None = Field(None, min_length=1, max_length=255)
    position: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    status: ApplicationStatus | None = None
    resume_link: str | None = Field(None, min_length=1, max_length=500)


class JobApplicationResponse(BaseModel):
    """Job application response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    candidate_name: str
    position: str
    email: str
    status: str
    resume_link: str
    created_at: datetime
    updated_at: datetime
