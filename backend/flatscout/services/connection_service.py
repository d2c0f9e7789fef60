"""Connection service: connection graph lookups derived from connection requests."""

from uuid import UUID

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from flatscout.models.connection_request import ConnectionRequest


def _between(user_a: UUID, user_b: UUID):
    return or_(
        and_(ConnectionRequest.from_user_id == user_a, ConnectionRequest.to_user_id == user_b),
        and_(ConnectionRequest.from_user_id == user_b, ConnectionRequest.to_user_id == user_a),
    )


async def get_connected_user_ids(db: AsyncSession, user_id: UUID) -> set[UUID]:
    """IDs of everyone the user is connected to (accepted in either direction)."""
    result = await db.execute(
        select(ConnectionRequest.from_user_id, ConnectionRequest.to_user_id)
        .where(
            or_(ConnectionRequest.from_user_id == user_id, ConnectionRequest.to_user_id == user_id),
            ConnectionRequest.status == "accepted",
        )
    )
    return {to_id if from_id == user_id else from_id for from_id, to_id in result}


async def get_requests_between(db: AsyncSession, user_a: UUID, user_b: UUID) -> list[ConnectionRequest]:
    result = await db.execute(
        select(ConnectionRequest)
        .where(_between(user_a, user_b))
        .order_by(ConnectionRequest.created_at.desc())
    )
    return list(result.scalars().all())


async def get_connection_status(db: AsyncSession, user_id: UUID, target_id: UUID) -> str:
    """Relationship of user to target, from the user's point of view.

    One of: connected, request_sent, request_received, not_connected.
    """
    requests = await get_requests_between(db, user_id, target_id)

    if any(r.status == "accepted" for r in requests):
        return "connected"
    for r in requests:
        if r.status == "pending":
            return "request_sent" if r.from_user_id == user_id else "request_received"
    return "not_connected"
