"""Consumed password-reset token markers."""

from sqlalchemy import Column, DateTime, Integer, String, func

from smart_erp.database import Base


class UsedResetToken(Base):
    """Records a reset token's jti once it has changed a password.

    Rows are only needed until the token itself would have expired;
    the maintenance task purges them after that.
    """

    __tablename__ = "used_reset_tokens"

    id = Column(Integer, primary_key=True, index=True)
    jti = Column(String(64), unique=True, nullable=False, index=True)
    user_id = Column(Integer, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
