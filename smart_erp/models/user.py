"""User model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from smart_erp.database import Base
from smart_erp.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Account that can sign in and own notifications."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="admin")
    last_login = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    notifications = relationship(
        "Notification",
        back_populates="user",
        cascade="all, delete-orphan",
    )
