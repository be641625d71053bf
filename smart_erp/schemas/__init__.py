"""Pydantic schemas for API requests and responses."""

from smart_erp.schemas.auth import (
    AuthResponse,
    ForgotPasswordRequest,
    MessageResponse,
    ResetPasswordRequest,
    UserLogin,
    UserPublic,
    UserRegister,
    UserResponse,
)
from smart_erp.schemas.common import BulkDeleteRequest, BulkDeleteResponse
from smart_erp.schemas.notification import (
    MarkAllReadResponse,
    NotificationCreate,
    NotificationResponse,
    UnreadCountResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "UserPublic",
    "UserResponse",
    "AuthResponse",
    "MessageResponse",
    "BulkDeleteRequest",
    "BulkDeleteResponse",
    "NotificationCreate",
    "NotificationResponse",
    "UnreadCountResponse",
    "MarkAllReadResponse",
]
