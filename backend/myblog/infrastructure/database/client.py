"""MongoDB client construction: one client per process, shared by all requests."""

import logging

from pymongo import AsyncMongoClient

from myblog.config import Settings

logger = logging.getLogger(__name__)


def build_mongo_client(settings: Settings) -> AsyncMongoClient:
    """Create the async client. The driver pools connections and connects lazily."""
    client = AsyncMongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )
    logger.info("build mongodb client, database=%s", settings.mongodb_database)
    return client
