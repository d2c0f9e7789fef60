"""Celery tasks for in-app notifications."""

import logging
from uuid import UUID

from flatscout.tasks.celery_app import celery_app
from flatscout.models.base import SyncSessionLocal

# Import ALL models so foreign keys resolve in the worker
from flatscout.models.user import User  # noqa: F401
from flatscout.models.flatmate_profile import FlatmateProfile  # noqa: F401
from flatscout.models.flat_listing import FlatListing  # noqa: F401
from flatscout.models.connection_request import ConnectionRequest
from flatscout.models.notification import Notification  # noqa: F401
from flatscout.services.notification_service import (
    delete_expired_notifications,
    notify_connection_accepted as build_accepted_notification,
    notify_connection_request as build_request_notification,
)

logger = logging.getLogger(__name__)


def _notify(request_id: str, builder, label: str):
    with SyncSessionLocal() as session:
        try:
            request = session.get(ConnectionRequest, UUID(request_id))
            if not request:
                logger.warning("Connection request %s vanished before %s notification", request_id, label)
                return None

            notification = builder(session, request)
            session.commit()
            if notification is None:
                return None
            logger.info("Sent %s notification %s to user %s", label, notification.id, notification.user_id)
            return str(notification.id)

        except Exception:
            session.rollback()
            logger.exception("Failed to send %s notification for request %s", label, request_id)
            raise


@celery_app.task(name="flatscout.tasks.notification_tasks.notify_connection_request")
def notify_connection_request(request_id: str):
    """Tell the recipient someone wants to connect."""
    return _notify(request_id, build_request_notification, "connection_request")


@celery_app.task(name="flatscout.tasks.notification_tasks.notify_connection_accepted")
def notify_connection_accepted(request_id: str):
    """Tell the original sender their request was accepted."""
    return _notify(request_id, build_accepted_notification, "connection_accepted")


@celery_app.task(name="flatscout.tasks.notification_tasks.cleanup_expired_notifications")
def cleanup_expired_notifications():
    """Delete expired notifications (runs daily at 3 AM via beat)."""
    with SyncSessionLocal() as session:
        try:
            deleted = delete_expired_notifications(session)
            session.commit()
            logger.info("Deleted %d expired notifications", deleted)
            return {"deleted": deleted}
        except Exception:
            session.rollback()
            logger.exception("Failed to clean up expired notifications")
            raise
