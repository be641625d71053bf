"""Vendor model."""

from sqlalchemy import Column, Integer, String

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class Vendor(Base, TimestampMixin):
    """Supplier under evaluation or approved for use."""

    __tablename__ = "vendors"

    id = Column(Integer, primary_key=True, index=True)
    vendor_name = Column(String(255), nullable=False)
    service_type = Column(String(100), nullable=False)
    contact_email = Column(String(255), nullable=False)
    rating = Column(Integer, nullable=True)  # 1-5
    status = Column(String(20), nullable=False, default="Evaluated")
