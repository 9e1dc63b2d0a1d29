"""FastAPI dependency injection: wires infrastructure to the application layer.

The MongoDB client is built once in the application lifespan and kept on
``app.state``; everything below is derived from it per request.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from pymongo.asynchronous.database import AsyncDatabase

from myblog.application.services import ArticleService
from myblog.domain.entities import Article
from myblog.infrastructure.database import MongoCrudRepository


def get_database(request: Request) -> AsyncDatabase:
    """Returns the shared database handle created at startup."""
    return request.app.state.database


def get_article_repository(
    database: AsyncDatabase = Depends(get_database),
) -> MongoCrudRepository[Article]:
    return MongoCrudRepository(database[Article.COLLECTION_NAME], Article)


async def get_article_service(
    repository: MongoCrudRepository[Article] = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)
