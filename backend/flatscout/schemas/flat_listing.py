"""Pydantic schemas for FlatListing model."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field, field_validator

from flatscout.schemas.common import CamelModel


class FlatListingBase(CamelModel):
    """Base fields for flat listing."""

    title: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1, max_length=100)
    state: str = Field(min_length=1, max_length=100)
    pincode: str = Field(min_length=1, max_length=20)
    price: str = Field(min_length=1, max_length=50)
    bedrooms: int = Field(ge=0)
    bathrooms: int = Field(ge=0)
    area: float = Field(gt=0)
    furnished: Literal["Furnished", "Semi-Furnished", "Unfurnished"]
    image: str = ""
    description: str = ""
    contact_name: str = Field(min_length=1, max_length=100)
    contact_phone: str = Field(min_length=1, max_length=30)
    contact_email: EmailStr

    @field_validator("title", "location", "address", "city", "state", "pincode", "contact_name", "contact_phone")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class FlatListingCreate(FlatListingBase):
    """Payload for a new listing."""


class FlatListingRead(FlatListingBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_by_id: UUID | None = None
    created_at: datetime
