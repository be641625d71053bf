"""Training schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TrainingStatus = Literal["Scheduled", "Completed"]


class TrainingSessionCreate(BaseModel):
    """Schedule training for an employee."""

    employee_name: str = Field(..., min_length=1, max_length=255)
    training_topic: str = Field(..., min_length=1, max_length=255)
    completion_date: datetime | None = None
    status: TrainingStatus = "Scheduled"


class TrainingSessionUpdate(BaseModel):
    """Update a training record."""

    employee_name: str | None = Field(None, min_length=1, max_length=255)
    training_topic: str | None = Field(None, min_length=1, max_length=255)
    completion_date: datetime | None = None
    status: TrainingStatus | None = None


class TrainingSessionResponse(BaseModel):
    """Training record response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_name: str
    training_topic: str
    completion_date: datetime | None
    status: str
    created_at: datetime
    updated_at: datetime
