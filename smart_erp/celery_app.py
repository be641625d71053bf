"""Celery application configuration."""

from celery import Celery
from celery.schedules import crontab

from smart_erp.config import get_settings

settings = get_settings()

app = Celery(
    "smart_erp",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["smart_erp.tasks.maintenance"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max per task
    task_soft_time_limit=240,  # 4 minutes soft limit
)

app.conf.beat_schedule = {
    "purge-expired-reset-markers": {
        "task": "smart_erp.tasks.maintenance.purge_expired_reset_markers",
        "schedule": crontab(minute=0),
    },
    "purge-orphaned-notifications": {
        "task": "smart_erp.tasks.maintenance.purge_orphaned_notifications",
        "schedule": crontab(minute=30),
    },
}
