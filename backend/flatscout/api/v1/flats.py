"""Flat listing API endpoints."""

import logging
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from flatscout.models.base import get_db
from flatscout.models.flat_listing import FlatListing
from flatscout.models.user import User
from flatscout.schemas.flat_listing import FlatListingCreate, FlatListingRead
from flatscout.dependencies.auth import require_user_api

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flats", tags=["flats"])


@router.post("", response_model=FlatListingRead, status_code=201)
async def create_flat(
    payload: FlatListingCreate,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    flat = FlatListing(**payload.model_dump(), created_by_id=user.id)
    db.add(flat)
    await db.flush()
    logger.info("User %s listed flat %s in %s", user.id, flat.id, flat.city)
    return flat


@router.get("", response_model=list[FlatListingRead])
async def list_flats(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    search: str | None = Query(None, min_length=2, description="Search in title"),
    city: str | None = Query(None, description="Filter by city"),
    furnished: Literal["Furnished", "Semi-Furnished", "Unfurnished"] | None = Query(
        None, description="Filter by furnishing"
    ),
):
    """List flats, newest first."""
    query = select(FlatListing)

    if search:
        query = query.where(FlatListing.title.ilike(f"%{search}%"))
    if city:
        query = query.where(FlatListing.city.ilike(f"%{city}%"))
    if furnished:
        query = query.where(FlatListing.furnished == furnished)

    query = query.order_by(FlatListing.created_at.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


@router.get("/{flat_id}", response_model=FlatListingRead)
async def get_flat(
    flat_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    flat = await db.get(FlatListing, flat_id)
    if not flat:
        raise HTTPException(status_code=404, detail="Flat not found")
    return flat
