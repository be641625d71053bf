"""Customer complaint model."""

from sqlalchemy import Column, Integer, String, Text

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class Complaint(Base, TimestampMixin):
    """Customer complaint ticket."""

    __tablename__ = "complaints"

    id = Column(Integer, primary_key=True, index=True)
    customer_name = Column(String(255), nullable=False)
    issue_type = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    priority = Column(String(20), nullable=False, default="Medium")
    status = Column(String(20), nullable=False, default="Open")
