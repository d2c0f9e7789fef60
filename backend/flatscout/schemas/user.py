"""Pydantic schemas for User model."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field

from flatscout.schemas.common import CamelModel


class UserRegister(CamelModel):
    email: EmailStr
    name: str = Field(min_length=1, max_length=100)
    password: str
    user_type: Literal["flat_owner", "flat_finder"] = "flat_finder"


class UserLogin(CamelModel):
    email: EmailStr
    password: str


class UserUpdate(CamelModel):
    """Only provided, non-empty fields are applied."""

    name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=30)
    bio: str | None = None
    location: str | None = Field(None, max_length=255)
    profile_image: str | None = None


class PasswordChange(CamelModel):
    current_password: str
    new_password: str


class UserRead(CamelModel):
    """Full account output (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str
    phone: str = ""
    bio: str = ""
    location: str = ""
    profile_image: str = ""
    role: str
    user_type: str
    has_completed_preferences: bool = False
    created_at: datetime


class UserSummary(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class ConnectedUser(UserSummary):
    profile_picture: str
