"""Sales order model."""

from sqlalchemy import JSON, Column, Float, Integer, String

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class Order(Base, TimestampMixin):
    """Customer order with embedded line items."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    customer_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    # Line items: [{"item_name": "Desk", "quantity": 2, "price": 120.0}, ...]
    items = Column(JSON, nullable=False, default=list)
    total_amount = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default="Pending")
    shipping_address = Column(String(500), nullable=False)
