"""Connection request model: accepted requests form the connection graph."""

from sqlalchemy import Column, String, DateTime, ForeignKey, Index, UniqueConstraint, Uuid

from flatscout.models.base import Base, TimestampMixin, UUIDMixin


class ConnectionRequest(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "connection_requests"

    from_user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    to_user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    status = Column(String(20), default="pending", nullable=False)  # pending, accepted, declined
    responded_at = Column(DateTime(timezone=True))

    __table_args__ = (
        UniqueConstraint("from_user_id", "to_user_id", name="uq_connection_requests_pair"),
        Index("idx_connection_requests_to_status", "to_user_id", "status"),
        Index("idx_connection_requests_from_status", "from_user_id", "status"),
    )
