"""Connection request endpoints: send, accept, decline, status, connected users."""

import logging
from datetime import datetime, timezone
from urllib.parse import quote
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from flatscout.config import get_settings
from flatscout.models.base import get_db
from flatscout.models.connection_request import ConnectionRequest
from flatscout.models.user import User
from flatscout.schemas.connection import (
    ConnectionRequestCreate,
    ConnectionRequestRead,
    ConnectionStatus,
    PendingRequest,
)
from flatscout.schemas.user import ConnectedUser, UserSummary
from flatscout.services.connection_service import (
    get_connected_user_ids,
    get_connection_status,
    get_requests_between,
)
from flatscout.dependencies.auth import require_user_api

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/connections", tags=["connections"])


async def _get_active_user(db: AsyncSession, user_id: UUID) -> User | None:
    result = await db.execute(
        select(User).where(User.id == user_id, User.is_active == True)  # noqa: E712
    )
    return result.scalar_one_or_none()


async def _get_request_for_recipient(db: AsyncSession, request_id: UUID, user: User) -> ConnectionRequest:
    request = await db.get(ConnectionRequest, request_id)
    if not request:
        raise HTTPException(status_code=404, detail="Connection request not found")
    if request.to_user_id != user.id:
        raise HTTPException(status_code=403, detail="Not authorized to respond to this request")
    if request.status != "pending":
        raise HTTPException(status_code=400, detail="This request has already been processed")
    return request


# --- Requests ---

@router.post("/requests", response_model=ConnectionRequestRead, status_code=201)
async def send_request(
    payload: ConnectionRequestCreate,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Send a connection request. Notifies the recipient."""
    if payload.to_user_id == user.id:
        raise HTTPException(status_code=400, detail="You cannot connect with yourself")

    target = await _get_active_user(db, payload.to_user_id)
    if not target:
        raise HTTPException(status_code=404, detail="Target user not found")

    existing = await get_requests_between(db, user.id, target.id)
    if any(r.status == "accepted" for r in existing):
        raise HTTPException(status_code=409, detail="Already connected to this user")
    for r in existing:
        if r.status == "pending":
            if r.from_user_id == user.id:
                raise HTTPException(status_code=409, detail="Connection request already sent")
            raise HTTPException(status_code=409, detail="This user has already sent you a connection request")

    # A declined request in the same direction is reopened rather than duplicated
    request = next((r for r in existing if r.from_user_id == user.id), None)
    if request:
        request.status = "pending"
        request.responded_at = None
    else:
        request = ConnectionRequest(from_user_id=user.id, to_user_id=target.id)
        db.add(request)

    try:
        await db.flush()
    except IntegrityError:
        # Lost a race with a concurrent send for the same pair
        await db.rollback()
        raise HTTPException(status_code=409, detail="Connection request already sent")

    await db.commit()
    logger.info("User %s sent connection request %s to %s", user.id, request.id, target.id)

    _fire_notification("notify_connection_request", request.id)
    return request


@router.post("/requests/{request_id}/accept", response_model=ConnectionRequestRead)
async def accept_request(
    request_id: UUID,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    request = await _get_request_for_recipient(db, request_id, user)
    request.status = "accepted"
    request.responded_at = datetime.now(timezone.utc)
    await db.commit()
    logger.info("User %s accepted connection request %s", user.id, request.id)

    _fire_notification("notify_connection_accepted", request.id)
    return request


@router.post("/requests/{request_id}/decline", response_model=ConnectionRequestRead)
async def decline_request(
    request_id: UUID,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    request = await _get_request_for_recipient(db, request_id, user)
    request.status = "declined"
    request.responded_at = datetime.now(timezone.utc)
    await db.flush()
    logger.info("User %s declined connection request %s", user.id, request.id)
    return request


@router.get("/requests/pending", response_model=list[PendingRequest])
async def pending_requests(
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Incoming requests awaiting the caller's answer, newest first."""
    result = await db.execute(
        select(ConnectionRequest, User)
        .join(User, ConnectionRequest.from_user_id == User.id)
        .where(ConnectionRequest.to_user_id == user.id, ConnectionRequest.status == "pending")
        .order_by(ConnectionRequest.created_at.desc())
    )
    return [
        PendingRequest(
            **ConnectionRequestRead.model_validate(request).model_dump(),
            from_user=UserSummary.model_validate(sender),
        )
        for request, sender in result.all()
    ]


# --- Status / graph ---

@router.get("/status/{target_user_id}", response_model=ConnectionStatus)
async def connection_status(
    target_user_id: UUID,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    target = await _get_active_user(db, target_user_id)
    if not target:
        raise HTTPException(status_code=404, detail="Target user not found")
    return ConnectionStatus(status=await get_connection_status(db, user.id, target.id))


@router.get("", response_model=list[ConnectedUser])
async def connected_users(
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Users connected to the caller, with a generated avatar when they have no photo."""
    connected_ids = await get_connected_user_ids(db, user.id)
    if not connected_ids:
        return []

    result = await db.execute(
        select(User).where(User.id.in_(connected_ids)).order_by(User.name)
    )
    template = get_settings().avatar_url_template
    return [
        ConnectedUser(
            id=u.id,
            name=u.name,
            email=u.email,
            profile_picture=u.profile_image or template.format(name=quote(u.name or "User")),
        )
        for u in result.scalars().all()
    ]


def _fire_notification(task_name: str, request_id: UUID):
    """Dispatch a notification task; a broker outage must not fail the request."""
    try:
        from flatscout.tasks import notification_tasks
        getattr(notification_tasks, task_name).delay(str(request_id))
    except Exception:
        logger.exception("Could not dispatch %s for request %s", task_name, request_id)
