"""Performance evaluation model."""

from sqlalchemy import Column, Float, Integer, String, Text

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class Evaluation(Base, TimestampMixin):
    """Periodic performance review for an employee."""

    __tablename__ = "evaluations"

    id = Column(Integer, primary_key=True, index=True)
    employee_name = Column(String(255), nullable=False)
    review_period = Column(String(50), nullable=False)
    score = Column(Float, nullable=False)
    comments = Column(Text, nullable=True)
