"""Vendor schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

VendorStatus = Literal["Evaluated", "Approved"]


class VendorCreate(BaseModel):
    """Register a vendor."""

    vendor_name: str = Field(..., min_length=1, max_length=255)
    service_type: str = Field(..., min_length=1, max_length=100)
    contact_email: EmailStr
    rating: int | None = Field(None, ge=1, le=5)
    status: VendorStatus = "Evaluated"


class VendorUpdate(BaseModel):
    """Update a vendor."""

    vendor_name: str | None = Field(None, min_length=1, max_length=255)
    service_type: str | None = Field(None, min_length=1, max_length=100)
    contact_email: EmailStr | None = None
    rating: int | None = Field(None, ge=1, le=5)
    status: VendorStatus | None = None


class VendorResponse(BaseModel):
    """Vendor response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    vendor_name: str
    service_type: str
    contact_email: str
    rating: int | None
    status: str
    created_at: datetime
    updated_at: datetime
