"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from myblog.config import get_settings
from myblog.infrastructure.database import build_mongo_client
from myblog.infrastructure.logging.log_config import setup_logging
from myblog.presentation.api.error_handlers import register_error_handlers
from myblog.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging, open and close the MongoDB client."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "[load_config] env=%s, host=%s, port=%d, database=%s",
        settings.app_env,
        settings.host,
        settings.port,
        settings.mongodb_database,
    )

    client = build_mongo_client(settings)
    app.state.mongo_client = client
    app.state.database = client[settings.mongodb_database]

    yield

    # Shutdown
    await client.close()
    logger.info("mongodb client closed")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "myblog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
