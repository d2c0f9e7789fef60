"""Authentication dependencies for FastAPI routes."""

from uuid import UUID

from fastapi import Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flatscout.models.base import get_db
from flatscout.models.user import User


def _session_user_id(request: Request) -> UUID | None:
    raw = request.session.get("user_id")
    if not raw:
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User | None:
    """Return the logged-in user or None."""
    user_id = _session_user_id(request)
    if not user_id:
        return None
    result = await db.execute(
        select(User).where(User.id == user_id, User.is_active == True)  # noqa: E712
    )
    return result.scalar_one_or_none()


async def require_user_api(request: Request, db: AsyncSession = Depends(get_db)) -> User:
    """Return the logged-in user or raise 401."""
    user = await get_current_user(request, db)
    if not user:
        raise HTTPException(status_code=401, detail="Login required")
    return user


def login_session(request: Request, user: User) -> None:
    request.session["user_id"] = str(user.id)
