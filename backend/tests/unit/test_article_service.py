"""Unit tests for the ArticleService."""

from typing import Any

import pytest
from bson import ObjectId

from myblog.application.interfaces import CrudRepository
from myblog.application.schemas import ArticleCreate, ArticleUpdate
from myblog.application.services import ArticleService
from myblog.domain.entities import Article


class RecordingArticleRepository(CrudRepository[Article]):
    """Fake repository that remembers what the service asked for."""

    def __init__(self):
        self.filters: list[dict[str, Any]] = []
        self.saved: list[Article] = []
        self.updates: list[tuple[ObjectId, Article]] = []
        self.removed: list[ObjectId] = []
        self.next_id = ObjectId()

    async def list_with_filter(self, filter_doc: dict[str, Any]) -> list[Article]:
        self.filters.append(filter_doc)
        return [Article(title="T", author="A", content="C", id=self.next_id)]

    async def save(self, record: Article) -> str:
        self.saved.append(record)
        return str(self.next_id)

    async def update_by_id(self, record_id: ObjectId, record: Article) -> int:
        self.updates.append((record_id, record))
        return 1

    async def remove_by_id(self, record_id: ObjectId) -> int:
        self.removed.append(record_id)
        return 0


@pytest.fixture
def repository() -> RecordingArticleRepository:
    return RecordingArticleRepository()


@pytest.fixture
def service(repository) -> ArticleService:
    return ArticleService(repository)


@pytest.mark.asyncio
async def test_list_articles_without_criteria_uses_empty_filter(service, repository):
    articles = await service.list_articles()
    assert repository.filters == [{}]
    assert articles[0].title == "T"


@pytest.mark.asyncio
async def test_list_articles_builds_id_and_keyword_filter(service, repository):
    oid = ObjectId()
    await service.list_articles(article_id=oid, keyword="rust")
    [filter_doc] = repository.filters
    assert filter_doc["_id"] == oid
    assert {"title": {"$regex": "rust", "$options": "i"}} in filter_doc["$or"]


@pytest.mark.asyncio
async def test_create_article_returns_repository_id(service, repository):
    article_id = await service.create_article(ArticleCreate(title="A", author="B", content="C"))
    assert article_id == str(repository.next_id)
    assert repository.saved == [Article(title="A", author="B", content="C")]


@pytest.mark.asyncio
async def test_update_article_passes_only_given_fields(service, repository):
    oid = ObjectId()
    modified = await service.update_article(oid, ArticleUpdate(title="New"))
    assert modified == 1
    assert repository.updates == [(oid, Article(title="New"))]


@pytest.mark.asyncio
async def test_delete_article_reports_count(service, repository):
    oid = ObjectId()
    assert await service.delete_article(oid) == 0
    assert repository.removed == [oid]
