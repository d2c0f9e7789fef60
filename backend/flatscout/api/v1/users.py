"""User account endpoints: register, login, logout, profile, password."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from flatscout.models.base import get_db
from flatscout.models.user import User
from flatscout.schemas.user import (
    PasswordChange,
    UserLogin,
    UserRead,
    UserRegister,
    UserSummary,
    UserUpdate,
)
from flatscout.services.auth_service import (
    hash_password,
    normalize_email,
    password_problem,
    verify_password,
)
from flatscout.dependencies.auth import login_session, require_user_api

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=UserRead, status_code=201)
async def register(
    payload: UserRegister,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """Create an account and log it in."""
    problem = password_problem(payload.password)
    if problem:
        raise HTTPException(status_code=400, detail=problem)

    user = User(
        email=normalize_email(payload.email),
        name=payload.name.strip(),
        hashed_password=hash_password(payload.password),
        user_type=payload.user_type,
        last_login_at=datetime.now(timezone.utc),
    )
    db.add(user)

    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")

    login_session(request, user)
    await db.commit()
    logger.info("Registered user %s", user.id)
    return user


@router.post("/login", response_model=UserRead)
async def login(
    payload: UserLogin,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(User).where(User.email == normalize_email(payload.email)))
    user = result.scalar_one_or_none()

    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not user.is_active:
        raise HTTPException(status_code=403, detail="This account has been deactivated")

    login_session(request, user)
    user.last_login_at = datetime.now(timezone.utc)
    await db.commit()
    logger.info("User %s logged in", user.id)
    return user


@router.post("/logout", status_code=204)
async def logout(request: Request):
    request.session.clear()


@router.get("/me", response_model=UserRead)
async def get_me(user: User = Depends(require_user_api)):
    return user


@router.put("/me", response_model=UserRead)
async def update_me(
    payload: UserUpdate,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Update public profile fields. Empty values leave a field unchanged."""
    for field, value in payload.model_dump(exclude_none=True).items():
        if isinstance(value, str):
            value = value.strip()
        if value:
            setattr(user, field, value)

    await db.flush()
    return user


@router.put("/me/password", status_code=204)
async def change_password(
    payload: PasswordChange,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    if not verify_password(payload.current_password, user.hashed_password):
        raise HTTPException(status_code=400, detail="Current password is incorrect")

    problem = password_problem(payload.new_password)
    if problem:
        raise HTTPException(status_code=400, detail=problem)

    user.hashed_password = hash_password(payload.new_password)
    await db.flush()
    logger.info("User %s changed password", user.id)


@router.get("/by-email/{email}", response_model=UserSummary)
async def get_user_by_email(
    email: str,
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(User).where(User.email == normalize_email(email), User.is_active == True)  # noqa: E712
    )
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
