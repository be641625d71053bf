"""Notification feed API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from smart_erp.api.dependencies import TokenClaims, get_notification_service, get_token_claims
from smart_erp.models import Notification
from smart_erp.schemas.notification import (
    MarkAllReadResponse,
    NotificationCreate,
    NotificationResponse,
    UnreadCountResponse,
)
from smart_erp.services.notification_service import NotificationService

router = APIRouter(prefix="/api/notifications", tags=["notifications"])

# Registered by the app in development only
dev_router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> list[Notification]:
    """Get the current user's notifications, newest first."""
    return service.list_for_user(claims.user_id)


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> UnreadCountResponse:
    """Get the number of unread notifications."""
    return UnreadCountResponse(count=service.unread_count(claims.user_id))


@router.put("/mark-all-read", response_model=MarkAllReadResponse)
async def mark_all_read(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> MarkAllReadResponse:
    """Mark every notification read."""
    updated = service.mark_all_read(claims.user_id)
    return MarkAllReadResponse(message="All notifications marked as read", updated_count=updated)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: int,
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> Notification:
    """Mark one notification read."""
    return service.mark_read(claims.user_id, notification_id)


@dev_router.post("/test", response_model=NotificationResponse)
async def create_test_notification(
    data: NotificationCreate,
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> Notification:
    """Create a notification for the current user by hand."""
    return service.create(claims.user_id, data.title, data.message, data.type)
