"""Notification-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from smart_erp.models.enums import NotificationType


class NotificationCreate(BaseModel):
    """Schema for creating a notification by hand (development only)."""

    type: NotificationType = NotificationType.INFO
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)


class NotificationResponse(BaseModel):
    """Schema for a notification in the feed."""

    id: int
    user_id: int
    type: NotificationType
    title: str
    message: str
    read: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class UnreadCountResponse(BaseModel):
    """Schema for the unread badge count."""

    count: int


class MarkAllReadResponse(BaseModel):
    """Schema for the mark-all-read result."""

    message: str
    updated_count: int
