"""Inventory item model."""

from sqlalchemy import Column, Float, Integer, String

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class InventoryItem(Base, TimestampMixin):
    """Stock-keeping unit tracked in the warehouse."""

    __tablename__ = "inventory_items"

    id = Column(Integer, primary_key=True, index=True)
    item_name = Column(String(255), nullable=False)
    sku = Column(String(100), unique=True, nullable=False, index=True)
    current_stock = Column(Integer, nullable=False)
    reorder_point = Column(Integer, nullable=False, default=10)
    unit_price = Column(Float, nullable=False)
    supplier = Column(String(255), nullable=False)
