"""Procurement schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ProcurementStatus = Literal["Requested", "Approved", "Ordered"]


class ProcurementRequestCreate(BaseModel):
    """Request an item for purchase."""

    item_name: str = Field(..., min_length=1, max_length=255)
    department: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., gt=0)
    budget: float = Field(..., ge=0)
    status: ProcurementStatus = "Requested"


class ProcurementRequestUpdate(BaseModel):
    """Update a procurement request."""

    item_name: str | None = Field(None, min_length=1, max_length=255)
    department: str | None = Field(None, min_length=1, max_length=100)
    quantity: int | None = Field(None, gt=0)
    budget: float | None = Field(None, ge=0)
    status: ProcurementStatus | None = None


class ProcurementRequestResponse(BaseModel):
    """Procurement request response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    item_name: str
    department: str
    quantity: int
    budget: float
    status: str
    created_at: datetime
    updated_at: datetime
