"""Job application model (recruitment)."""

from sqlalchemy import Column, Integer, String

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class JobApplication(Base, TimestampMixin):
    """Candidate applying for an open position."""

    __tablename__ = "job_applications"

    id = Column(Integer, primary_key=True, index=True)
    candidate_name = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False, default="Applied")
    resume_link = Column(String(500), nullable=False)
