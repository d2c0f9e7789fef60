"""Liveness and dependency health checks."""

import logging
from datetime import datetime, timezone

import redis.asyncio as aioredis
from fastapi import APIRouter
from sqlalchemy import text
from starlette.concurrency import run_in_threadpool

from flatscout.config import get_settings
from flatscout.models.base import AsyncSessionLocal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


async def _check_database() -> dict:
    async with AsyncSessionLocal() as session:
        await session.execute(text("SELECT 1"))
    return {"ok": True}


async def _check_redis() -> dict:
    settings = get_settings()
    client = aioredis.from_url(
        settings.redis_url,
        socket_timeout=settings.health_check_timeout,
        socket_connect_timeout=settings.health_check_timeout,
    )
    try:
        await client.ping()
    finally:
        await client.aclose()
    return {"ok": True}


def _inspect_workers() -> dict:
    """Active tasks keyed by worker name. Blocks on the broker round-trip."""
    from flatscout.tasks.celery_app import celery_app

    inspect = celery_app.control.inspect(timeout=get_settings().health_check_timeout)
    return inspect.active() or {}


async def _check_celery() -> dict:
    workers = await run_in_threadpool(_inspect_workers)
    return {"ok": bool(workers), "workers": list(workers.keys())}


@router.get("")
async def health_check():
    return {"status": "healthy", "app": get_settings().app_name}


@router.get("/detailed")
async def detailed_health_check():
    """Database, Redis and Celery worker status. Any failure reports "degraded"."""
    checks = {}
    for name, check in (
        ("database", _check_database),
        ("redis", _check_redis),
        ("celery_workers", _check_celery),
    ):
        try:
            checks[name] = await check()
        except Exception as e:
            logger.warning("Health check %s failed: %s", name, e)
            checks[name] = {"ok": False, "message": str(e)}

    all_ok = all(check.get("ok", False) for check in checks.values())
    return {
        "status": "healthy" if all_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks,
    }
