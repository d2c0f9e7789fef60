"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware
from starlette.middleware.sessions import SessionMiddleware

from flatscout.config import get_settings
from flatscout.models.base import engine, Base
from flatscout.api.health import router as health_router
from flatscout.api.v1 import router as api_v1_router

# Register every table on Base.metadata before create_all
from flatscout.models.user import User  # noqa: F401
from flatscout.models.flatmate_profile import FlatmateProfile  # noqa: F401
from flatscout.models.connection_request import ConnectionRequest  # noqa: F401
from flatscout.models.flat_listing import FlatListing  # noqa: F401
from flatscout.models.notification import Notification  # noqa: F401

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting %s...", settings.app_name)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables verified")
    yield
    logger.info("Shutting down...")
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Flatmate matching and flat listings",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(GZipMiddleware, minimum_size=500)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie="flatscout_session",
    max_age=settings.session_max_age,
    same_site="lax",
    https_only=settings.session_https_only,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(api_v1_router)
