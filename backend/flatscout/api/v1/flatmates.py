"""Flatmate profile and matching endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flatscout.models.base import get_db
from flatscout.models.flatmate_profile import FlatmateProfile
from flatscout.models.user import User
from flatscout.schemas.flatmate_profile import (
    FlatmateMatch,
    FlatmateProfileRead,
    FlatmateProfileWrite,
    FullProfile,
)
from flatscout.schemas.user import UserRead
from flatscout.services.compatibility_service import score_pair
from flatscout.services.matching_service import find_matches, get_profile_for_user, profile_record
from flatscout.dependencies.auth import get_current_user, require_user_api

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flatmates", tags=["flatmates"])


@router.get("/profile/{user_id}", response_model=FlatmateProfileRead)
async def get_flatmate_profile(
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    profile = await get_profile_for_user(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Flatmate profile not found")
    return profile


@router.get("/profile/full/{user_id}", response_model=FullProfile)
async def get_full_profile(
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
    viewer: User | None = Depends(get_current_user),
):
    """User account plus flatmate profile (null if none).

    When a logged-in viewer with their own profile looks at someone else,
    the response includes their compatibility score.
    """
    result = await db.execute(
        select(User).where(User.id == user_id, User.is_active == True)  # noqa: E712
    )
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    profile = await get_profile_for_user(db, user_id)

    compatibility = None
    if profile and viewer and viewer.id != user.id:
        viewer_profile = await get_profile_for_user(db, viewer.id)
        if viewer_profile:
            compatibility = score_pair(profile_record(viewer_profile), profile_record(profile))

    return FullProfile(
        user=UserRead.model_validate(user),
        profile=FlatmateProfileRead.model_validate(profile) if profile else None,
        compatibility=compatibility,
    )


@router.put("/profile", response_model=FlatmateProfileRead)
async def upsert_flatmate_profile(
    payload: FlatmateProfileWrite,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Create or replace the caller's flatmate profile."""
    values = payload.model_dump()

    profile = await get_profile_for_user(db, user.id)
    if profile:
        for field, value in values.items():
            setattr(profile, field, value)
        action = "Updated"
    else:
        profile = FlatmateProfile(user_id=user.id, **values)
        db.add(profile)
        action = "Created"

    user.has_completed_preferences = True
    await db.flush()
    logger.info("%s flatmate profile for user %s", action, user.id)
    return profile


@router.get("/matches", response_model=list[FlatmateMatch])
async def get_matches(
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Every other flatmate ranked by compatibility with the caller.

    Excludes the caller and users they are already connected to.
    """
    profile = await get_profile_for_user(db, user.id)
    if not profile:
        raise HTTPException(status_code=404, detail="Create your flatmate profile first")

    return await find_matches(db, user.id, profile)
