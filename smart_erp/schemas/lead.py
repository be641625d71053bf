"""CRM lead schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

InterestLevel = Literal["Hot", "Warm", "Cold"]
LeadStatus = Literal["New", "Contacted", "Closed"]


class LeadCreate(BaseModel):
    """Capture a lead."""

    customer_name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., min_length=1, max_length=30)
    interest_level: InterestLevel = "Warm"
    status: LeadStatus = "New"


class LeadUpdate(BaseModel):
    """Update a lead."""

    customer_name: str | None = Field(None, min_length=1, max_length=255)
    phone: str | None = Field(None, min_length=1, max_length=30)
    interest_level: InterestLevel | None = None
    status: LeadStatus | None = None


class LeadResponse(BaseModel):
    """Lead response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_name: str
    phone: str
    interest_level: str
    status: str
    created_at: datetime
    updated_at: datetime
