"""Celery tasks that keep auth and notification tables tidy."""

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from smart_erp.celery_app import app as celery_app
from smart_erp.database import SessionLocal
from smart_erp.models import Notification, UsedResetToken, User

logger = logging.getLogger(__name__)


@celery_app.task
def purge_expired_reset_markers() -> dict:
    """Delete consumed reset-token markers whose token has expired anyway.

    Runs hourly via celery-beat. An expired token is rejected on its
    expiry alone, so its marker is no longer needed.

    Returns:
        dict with the number of rows deleted
    """
    db: Session = SessionLocal()

    try:
        deleted = (
            db.query(UsedResetToken)
            .filter(UsedResetToken.expires_at < datetime.now(UTC))
            .delete(synchronize_session=False)
        )
        db.commit()
        logger.info(f"Purged {deleted} expired reset token markers")
        return {"deleted": deleted}

    except Exception as e:
        logger.error(f"Error purging reset token markers: {e}", exc_info=True)
        db.rollback()
        return {"error": str(e)}

    finally:
        db.close()


@celery_app.task
def purge_orphaned_notifications() -> dict:
    """Delete notifications whose owner account no longer exists.

    Runs hourly via celery-beat. Account deletion already removes a user's
    notifications; this catches rows left behind by older data or by
    databases that don't enforce the foreign key (SQLite without PRAGMA).

    Returns:
        dict with the number of rows deleted
    """
    db: Session = SessionLocal()

    try:
        deleted = (
            db.query(Notification)
            .filter(~Notification.user_id.in_(select(User.id)))
            .delete(synchronize_session=False)
        )
        db.commit()
        if deleted:
            logger.warning(f"Purged {deleted} orphaned notifications")
        return {"deleted": deleted}

    except Exception as e:
        logger.error(f"Error purging orphaned notifications: {e}", exc_info=True)
        db.rollback()
        return {"error": str(e)}

    finally:
        db.close()
