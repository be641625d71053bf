"""Inventory schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class InventoryItemCreate(BaseModel):
    """Add an inventory item."""

    item_name: str = Field(..., min_length=1, max_length=255)
    sku: str = Field(..., min_length=1, max_length=100)
    current_stock: int = Field(..., ge=0)
    reorder_point: int = Field(10, ge=0)
    unit_price: float = Field(..., ge=0)
    supplier: str = Field(..., min_length=1, max_length=255)


class InventoryItemUpdate(BaseModel):
    """Update an inventory item."""

    item_name: str | None = Field(None, min_length=1, max_length=255)
    sku: str | None = Field(None, min_length=1, max_length=100)
    current_stock: int | None = Field(None, ge=0)
    reorder_point: int | None = Field(None, ge=0)
    unit_price: float | None = Field(None, ge=0)
    supplier: str | None = Field(None, min_length=1, max_length=255)


class InventoryItemResponse(BaseModel):
    """Inventory item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    item_name: str
    sku: str
    current_stock: int
    reorder_point: int
    unit_price: float
    supplier: str
    created_at: datetime
    updated_at: datetime
