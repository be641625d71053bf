"""Performance evaluation schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EvaluationCreate(BaseModel):
    """Record a performance evaluation."""

    employee_name: str = Field(..., min_length=1, max_length=255)
    review_period: str = Field(..., min_length=1, max_length=50)
    score: float
    comments: str | None = Field(None, max_length=5000)


class EvaluationUpdate(BaseModel):
    """Update a performance evaluation."""

    employee_name: str | None = Field(None, min_length=1, max_length=255)
    review_period: str | None = Field(None, min_length=1, max_length=50)
    score: float | None = None
    comments: str | None = Field(None, max_length=5000)


class EvaluationResponse(BaseModel):
    """Performance evaluation response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_name: str
    review_period: str
    score: float
    comments: str | None
    created_at: datetime
    updated_at: datetime
