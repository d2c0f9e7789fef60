"""API v1 router aggregation."""

from fastapi import APIRouter

from flatscout.api.v1.users import router as users_router
from flatscout.api.v1.flatmates import router as flatmates_router
from flatscout.api.v1.connections import router as connections_router
from flatscout.api.v1.flats import router as flats_router
from flatscout.api.v1.notifications import router as notifications_router

router = APIRouter(prefix="/api/v1")

router.include_router(users_router)
router.include_router(flatmates_router)
router.include_router(connections_router)
router.include_router(flats_router)
router.include_router(notifications_router)
