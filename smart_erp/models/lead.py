"""CRM lead model."""

from sqlalchemy import Column, Integer, String

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class Lead(Base, TimestampMixin):
    """Sales lead tracked in the CRM."""

    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, index=True)
    customer_name = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=False)
    interest_level = Column(String(10), nullable=False, default="Warm")
    status = Column(String(20), nullable=False, default="New")
