"""Notification feed service: create, list, and mark notifications read."""

import logging

from sqlalchemy.orm import Session

from smart_erp.exceptions import Forbidden, NotFound
from smart_erp.models import Notification, User
from smart_erp.models.enums import NotificationType
from smart_erp.services.realtime import NotificationEventType, publish_notification_event

logger = logging.getLogger(__name__)


class NotificationService:
    """Per-user, append-only message feed with a one-way unread -> read flag."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(
        self,
        user_id: int,
        title: str,
        message: str,
        notification_type: NotificationType = NotificationType.INFO,
        commit: bool = True,
    ) -> Notification:
        """Append a notification to a user's feed.

        Other modules call this as a side effect of their own operations.
        The owner must exist at creation time.

        Args:
            user_id: Owner of the new notification
            title: Short headline
            message: Body text
            notification_type: info, success, warning or alert
            commit: Commit immediately; pass False to join the caller's transaction

        Raises:
            NotFound: If the owner account does not exist
        """
        owner_exists = self.db.query(User.id).filter(User.id == user_id).first()
        if owner_exists is None:
            raise NotFound("Account not found")

        notification = Notification(
            user_id=user_id,
            type=NotificationType(notification_type).value,
            title=title,
            message=message,
            read=False,
        )
        self.db.add(notification)
        if commit:
            self.db.commit()
            self.db.refresh(notification)
            self.publish_created(notification)
        else:
            self.db.flush()

        logger.info(f"Notification {notification.id} created for user {user_id}")
        return notification

    def list_for_user(self, user_id: int) -> list[Notification]:
        """All notifications owned by the user, newest first."""
        return (
            self.db.query(Notification)
            .filter(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .all()
        )

    def unread_count(self, user_id: int) -> int:
        """Number of unread notifications for the header badge."""
        return (
            self.db.query(Notification)
            .filter(Notification.user_id == user_id, Notification.read.is_(False))
            .count()
        )

    def mark_read(self, user_id: int, notification_id: int) -> Notification:
        """Mark one notification read.

        Raises:
            NotFound: If the notification does not exist
            Forbidden: If it belongs to another account
        """
        notification = (
            self.db.query(Notification).filter(Notification.id == notification_id).first()
        )
        if notification is None:
            raise NotFound("Notification not found")
        if notification.user_id != user_id:
            raise Forbidden("Not authorized")

        if not notification.read:
            notification.read = True
            self.db.commit()
            self.db.refresh(notification)
            publish_notification_event(
                user_id,
                NotificationEventType.NOTIFICATION_READ,
                {"notification_id": notification.id},
            )
        return notification

    def mark_all_read(self, user_id: int) -> int:
        """Mark every unread notification read. Returns how many changed."""
        updated = (
            self.db.query(Notification)
            .filter(Notification.user_id == user_id, Notification.read.is_(False))
            .update({Notification.read: True})
        )
        self.db.commit()

        if updated:
            publish_notification_event(
                user_id, NotificationEventType.NOTIFICATIONS_ALL_READ, {"count": updated}
            )
        return updated

    def delete_for_user(self, user_id: int) -> int:
        """Delete every notification a user owns without committing."""
        return (
            self.db.query(Notification)
            .filter(Notification.user_id == user_id)
            .delete()
        )

    def publish_created(self, notification: Notification) -> None:
        """Push a created event once the owning transaction has committed."""
        publish_notification_event(
            notification.user_id,
            NotificationEventType.NOTIFICATION_CREATED,
            {
                "id": notification.id,
                "type": notification.type,
                "title": notification.title,
                "message": notification.message,
            },
        )

