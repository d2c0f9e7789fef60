"""In-app notification model."""

from sqlalchemy import Column, String, Boolean, DateTime, Text, ForeignKey, Index, Uuid

from flatscout.models.base import Base, JSONType, TimestampMixin, UUIDMixin

NOTIFICATION_TYPES = (
    "connection_request",
    "connection_accepted",
)
NOTIFICATION_PRIORITIES = ("low", "medium", "high", "urgent")


class Notification(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "notifications"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    type = Column(String(40), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    data = Column(JSONType, default=dict, nullable=False)

    read = Column(Boolean, default=False, nullable=False)
    read_at = Column(DateTime(timezone=True))
    priority = Column(String(10), default="medium", nullable=False)

    action_url = Column(String(255))
    action_text = Column(String(100))
    expires_at = Column(DateTime(timezone=True), index=True)
    sent_via = Column(JSONType, default=list, nullable=False)  # in_app

    __table_args__ = (
        Index("idx_notifications_user_created", "user_id", "created_at"),
        Index("idx_notifications_user_read", "user_id", "read"),
    )
