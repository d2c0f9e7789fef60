"""In-app notification endpoints."""

import math
from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from flatscout.models.base import get_db
from flatscout.models.notification import Notification
from flatscout.models.user import User
from flatscout.schemas.common import Pagination
from flatscout.schemas.notification import MarkAllReadResult, NotificationPage, NotificationRead
from flatscout.dependencies.auth import require_user_api

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationPage)
async def list_notifications(
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    unread_only: bool = Query(False, description="Only return unread notifications"),
):
    """The caller's notifications, newest first, with the unread count."""
    base_filter = [Notification.user_id == user.id]
    if unread_only:
        base_filter.append(Notification.read == False)  # noqa: E712

    total = (await db.execute(
        select(func.count(Notification.id)).where(*base_filter)
    )).scalar() or 0

    unread_count = (await db.execute(
        select(func.count(Notification.id)).where(
            Notification.user_id == user.id, Notification.read == False  # noqa: E712
        )
    )).scalar() or 0

    result = await db.execute(
        select(Notification)
        .where(*base_filter)
        .order_by(Notification.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
    )

    return NotificationPage(
        notifications=[NotificationRead.model_validate(n) for n in result.scalars().all()],
        pagination=Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit)),
        unread_count=unread_count,
    )


@router.put("/read-all", response_model=MarkAllReadResult)
async def mark_all_read(
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        update(Notification)
        .where(Notification.user_id == user.id, Notification.read == False)  # noqa: E712
        .values(read=True, read_at=datetime.now(timezone.utc))
    )
    return MarkAllReadResult(updated_count=result.rowcount or 0)


@router.put("/{notification_id}/read", response_model=NotificationRead)
async def mark_read(
    notification_id: UUID,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    notification = await db.get(Notification, notification_id)
    if not notification or notification.user_id != user.id:
        raise HTTPException(status_code=404, detail="Notification not found")

    if not notification.read:
        notification.read = True
        notification.read_at = datetime.now(timezone.utc)
        await db.flush()
    return notification
