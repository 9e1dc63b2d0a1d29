"""Health check endpoint: reports the storage connection alongside app metadata."""

import logging

from fastapi import APIRouter, Depends
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from myblog.config import get_settings
from myblog.infrastructure.dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(database: AsyncDatabase = Depends(get_database)) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    try:
        await database.command("ping")
        storage = "up"
    except PyMongoError as exc:
        logger.warning("MongoDB ping failed: %s", exc)
        storage = "down"
    return {
        "status": "healthy" if storage == "up" else "degraded",
        "version": settings.app_version,
        "environment": settings.app_env,
        "storage": storage,
    }
