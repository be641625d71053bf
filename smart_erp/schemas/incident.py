"""IT incident schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

IncidentPriority = Literal["Low", "High"]
IncidentStatus = Literal["Open", "Resolved"]


class IncidentCreate(BaseModel):
    """Open an IT incident."""

    requester_name: str = Field(..., min_length=1, max_length=255)
    issue_description: str = Field(..., min_length=1)
    priority: IncidentPriority = "Low"
    status: IncidentStatus = "Open"


class IncidentUpdate(BaseModel):
    """Update an IT incident."""

    requester_name: str | None = Field(None, min_length=1, max_length=255)
    issue_description: str | None = Field(None, min_length=1)
    priority: IncidentPriority | None = None
    status: IncidentStatus | None = None


class IncidentResponse(BaseModel):
    """IT incident response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    requester_name: str
    issue_description: str
    priority: str
    status: str
    created_at: datetime
    updated_at: datetime
