"""Notification service: in-app notifications and their message templates.

Functions take a synchronous session; they run inside Celery tasks.
"""

from datetime import timedelta
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from flatscout.config import get_settings
from flatscout.models.base import utcnow
from flatscout.models.connection_request import ConnectionRequest
from flatscout.models.notification import Notification, NOTIFICATION_PRIORITIES, NOTIFICATION_TYPES
from flatscout.models.user import User


def create_notification(
    session: Session,
    user_id: UUID,
    type: str,
    title: str,
    message: str,
    data: dict | None = None,
    priority: str = "medium",
    action_url: str | None = None,
    action_text: str | None = None,
    ttl_days: int | None = None,
) -> Notification:
    """Store an in-app notification for a user."""
    if type not in NOTIFICATION_TYPES:
        raise ValueError(f"Unknown notification type: {type}")
    if priority not in NOTIFICATION_PRIORITIES:
        raise ValueError(f"Unknown notification priority: {priority}")

    if ttl_days is None:
        ttl_days = get_settings().notification_ttl_days

    notification = Notification(
        user_id=user_id,
        type=type,
        title=title,
        message=message,
        data=data or {},
        priority=priority,
        action_url=action_url,
        action_text=action_text,
        expires_at=utcnow() + timedelta(days=ttl_days) if ttl_days else None,
        sent_via=["in_app"],
    )
    session.add(notification)
    session.flush()
    return notification


def notify_connection_request(session: Session, request: ConnectionRequest) -> Notification | None:
    sender = session.get(User, request.from_user_id)
    if not sender:
        return None
    return create_notification(
        session,
        user_id=request.to_user_id,
        type="connection_request",
        title="New Connection Request",
        message=f"{sender.name} wants to connect with you!",
        data={"from_user_id": str(sender.id), "connection_request_id": str(request.id)},
        action_url="/profile",
        action_text="View Request",
    )


def notify_connection_accepted(session: Session, request: ConnectionRequest) -> Notification | None:
    accepter = session.get(User, request.to_user_id)
    if not accepter:
        return None
    return create_notification(
        session,
        user_id=request.from_user_id,
        type="connection_accepted",
        title="Connection Accepted!",
        message=f"{accepter.name} accepted your connection request. You can now chat!",
        data={"from_user_id": str(accepter.id), "connection_request_id": str(request.id)},
        action_url="/chat",
        action_text="Start Chatting",
    )


def delete_expired_notifications(session: Session) -> int:
    """Delete notifications past their expiry. Returns the number removed."""
    now = utcnow()
    expired_ids = session.execute(
        select(Notification.id).where(Notification.expires_at.isnot(None), Notification.expires_at < now)
    ).scalars().all()
    if not expired_ids:
        return 0
    session.execute(delete(Notification).where(Notification.id.in_(expired_ids)))
    return len(expired_ids)
