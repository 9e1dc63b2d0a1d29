"""Application service (use case) for Article operations."""

import logging

from bson import ObjectId

from myblog.application.interfaces import CrudRepository
from myblog.application.schemas import ArticleCreate, ArticleUpdate
from myblog.application.services.article_filter import build_article_filter
from myblog.domain.entities import Article

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article use cases. Depends on the repository port (DI).

    Identifiers arrive already parsed; storage failures surface as
    ``InternalError`` from the repository.
    """

    def __init__(self, repository: CrudRepository[Article]):
        self._repository = repository

    async def list_articles(self, article_id: ObjectId | None = None, keyword: str = "") -> list[Article]:
        filter_doc = build_article_filter(article_id, keyword)
        return await self._repository.list_with_filter(filter_doc)

    async def create_article(self, data: ArticleCreate) -> str:
        article_id = await self._repository.save(data.to_entity())
        logger.info("save_article, id=%s", article_id)
        return article_id

    async def update_article(self, article_id: ObjectId, data: ArticleUpdate) -> int:
        modified = await self._repository.update_by_id(article_id, data.to_entity())
        logger.info("update_article, id=%s, modified=%d", article_id, modified)
        return modified

    async def delete_article(self, article_id: ObjectId) -> int:
        deleted = await self._repository.remove_by_id(article_id)
        logger.info("delete_article, id=%s, deleted=%d", article_id, deleted)
        return deleted
