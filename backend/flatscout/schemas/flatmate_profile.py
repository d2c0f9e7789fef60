"""Pydantic schemas for FlatmateProfile model."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from flatscout.schemas.common import CamelModel
from flatscout.schemas.user import UserRead


class Habits(CamelModel):
    """Lifestyle habits. Values are free text; scoring only recognizes
    Yes/No, Early/Late and Low/Medium/High."""

    smoking: str = Field(max_length=20)
    pets: str = Field(max_length=20)
    sleep_time: str = Field(max_length=20)
    cleanliness: str = Field(max_length=20)


class FlatmateProfileBase(CamelModel):
    # max_length values mirror the column sizes in models/flatmate_profile.py
    name: str = Field(min_length=1, max_length=100)
    photo_url: str | None = None
    gender: str = Field(max_length=20)
    age: int = Field(ge=16, le=120)
    occupation: str = Field(max_length=100)
    hometown: str = Field(max_length=100)
    languages: list[str]
    food_preference: str = Field(max_length=50)
    social_preference: str = Field(max_length=50)
    hobbies: list[str] = []
    work_mode: str = Field(max_length=50)
    relationship_status: str | None = Field(None, max_length=50)
    music_preference: str | None = Field(None, max_length=100)
    guest_policy: str = Field(max_length=50)
    wakeup_time: str | None = Field(None, max_length=20)
    bedtime: str | None = Field(None, max_length=20)
    preferred_gender: str = Field(max_length=20)
    budget: float = Field(ge=0)
    location_preference: str = Field(max_length=255)
    habits: Habits
    bio: str


class FlatmateProfileWrite(FlatmateProfileBase):
    """Create-or-replace payload for the caller's own profile."""


class FlatmateProfileRead(FlatmateProfileBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class FlatmateMatch(FlatmateProfileRead):
    """A candidate profile annotated with its compatibility (0-100)."""

    compatibility: int


class FullProfile(CamelModel):
    user: UserRead
    profile: FlatmateProfileRead | None = None
    compatibility: int | None = None
