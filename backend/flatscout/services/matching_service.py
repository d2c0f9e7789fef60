"""Matching service: loads candidate flatmate profiles and ranks them by compatibility."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flatscout.config import get_settings
from flatscout.models.flatmate_profile import FlatmateProfile
from flatscout.models.user import User
from flatscout.schemas.flatmate_profile import FlatmateProfileRead
from flatscout.services.compatibility_service import rank_matches
from flatscout.services.connection_service import get_connected_user_ids

logger = logging.getLogger(__name__)


def profile_record(profile: FlatmateProfile) -> dict:
    """Plain snake_case record of a stored profile, as the scorer expects."""
    return FlatmateProfileRead.model_validate(profile).model_dump()


async def get_profile_for_user(db: AsyncSession, user_id: UUID) -> FlatmateProfile | None:
    result = await db.execute(select(FlatmateProfile).where(FlatmateProfile.user_id == user_id))
    return result.scalar_one_or_none()


async def find_matches(
    db: AsyncSession,
    user_id: UUID,
    reference: FlatmateProfile,
) -> list[dict]:
    """Rank every other active user's profile against the reference profile.

    The user's own profile and profiles of already-connected users are
    excluded before scoring. Users with a pending request either way are
    still candidates. A candidate without a photo falls back to their
    account profile image.
    """
    excluded = await get_connected_user_ids(db, user_id)
    excluded.add(user_id)

    result = await db.execute(
        select(FlatmateProfile, User.profile_image)
        .join(User, FlatmateProfile.user_id == User.id)
        .where(
            User.is_active == True,  # noqa: E712
            FlatmateProfile.user_id.notin_(excluded),
        )
        .order_by(FlatmateProfile.created_at.asc())
        .limit(get_settings().matches_limit)
    )
    candidates = []
    for profile, profile_image in result.all():
        record = profile_record(profile)
        if not record["photo_url"] and profile_image:
            record["photo_url"] = profile_image
        candidates.append(record)

    ranked = rank_matches(profile_record(reference), candidates)
    logger.info("Ranked %d flatmate candidates for user %s", len(ranked), user_id)
    return ranked
