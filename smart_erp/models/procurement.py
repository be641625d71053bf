"""Procurement request model."""

from sqlalchemy import Column, Float, Integer, String

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class ProcurementRequest(Base, TimestampMixin):
    """Department request to purchase an item."""

    __tablename__ = "procurement_requests"

    id = Column(Integer, primary_key=True, index=True)
    item_name = Column(String(255), nullable=False)
    department = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False)
    budget = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default="Requested")
