"""Order schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

OrderStatus = Literal["Pending", "Approved", "Shipped"]


class OrderLine(BaseModel):
    """A single line on an order."""

    item_name: str = Field(..., min_length=1, max_length=255)
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0)


class OrderCreate(BaseModel):
    """Place an order."""

    customer_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    items: list[OrderLine] = Field(default_factory=list)
    total_amount: float = Field(..., ge=0)
    status: OrderStatus = "Pending"
    shipping_address: str = Field(..., min_length=1, max_length=500)


class OrderUpdate(BaseModel):
    """Update an order."""

    customer_name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = None
    items: list[OrderLine] | None = None
    total_amount: float | None = Field(None, ge=0)
    status: OrderStatus | None = None
    shipping_address: str | None = Field(None, min_length=1, max_length=500)


class OrderResponse(BaseModel):
    """Order response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_name: str
    email: str
    items: list[OrderLine]
    total_amount: float
    status: str
    shipping_address: str
    created_at: datetime
    updated_at: datetime
