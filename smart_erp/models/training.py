"""Employee training model."""

from sqlalchemy import Column, DateTime, Integer, String

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class TrainingSession(Base, TimestampMixin):
    """Training assigned to an employee."""

    __tablename__ = "training_sessions"

    id = Column(Integer, primary_key=True, index=True)
    employee_name = Column(String(255), nullable=False)
    training_topic = Column(String(255), nullable=False)
    completion_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), nullable=False, default="Scheduled")
