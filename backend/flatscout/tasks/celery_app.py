"""Celery application configuration and beat schedule."""

from celery import Celery
from celery.schedules import crontab

from flatscout.config import get_settings

settings = get_settings()

celery_app = Celery(
    "flatscout",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=[
        "flatscout.tasks.notification_tasks",
    ],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    task_track_started=True,
    task_time_limit=120,
    task_soft_time_limit=100,
    worker_prefetch_multiplier=1,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
)

celery_app.conf.beat_schedule = {
    "cleanup-expired-notifications": {
        "task": "flatscout.tasks.notification_tasks.cleanup_expired_notifications",
        "schedule": crontab(minute=0, hour=3),
    },
}
