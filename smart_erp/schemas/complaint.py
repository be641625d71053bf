"""Complaint schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ComplaintPriority = Literal["Low", "Medium", "High"]
ComplaintStatus = Literal["Open", "Resolved"]


class ComplaintCreate(BaseModel):
    """File a complaint."""

    customer_name: str = Field(..., min_length=1, max_length=255)
    issue_type: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    priority: ComplaintPriority = "Medium"
    status: ComplaintStatus = "Open"


class ComplaintUpdate(BaseModel):
    """Update a complaint."""

    customer_name: str | None = Field(None, min_length=1, max_length=255)
    issue_type: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, min_length=1)
    priority: ComplaintPriority | None = None
    status: ComplaintStatus | None = None


class ComplaintResponse(BaseModel):
    """Complaint response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_name: str
    issue_type: str
    description: str
    priority: str
    status: str
    created_at: datetime
    updated_at: datetime
