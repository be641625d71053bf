"""IT support incident model."""

from sqlalchemy import Column, Integer, String, Text

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class Incident(Base, TimestampMixin):
    """IT helpdesk ticket."""

    __tablename__ = "incidents"

    id = Column(Integer, primary_key=True, index=True)
    requester_name = Column(String(255), nullable=False)
    issue_description = Column(Text, nullable=False)
    priority = Column(String(20), nullable=False, default="Low")
    status = Column(String(20), nullable=False, default="Open")
