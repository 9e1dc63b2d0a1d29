"""Article CRUD endpoints. Every response body is a RespResult envelope."""

import logging

from bson import ObjectId
from fastapi import APIRouter, Body, Depends, Query

from myblog.application.schemas import (
    ArticleCreate,
    ArticleQuery,
    ArticleResponse,
    ArticleUpdate,
    RespResult,
)
from myblog.application.services import ArticleService
from myblog.domain.exceptions import ValidationError
from myblog.domain.identifiers import parse_object_id
from myblog.infrastructure.dependencies import get_article_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])


def _parse_id(raw: str | None, operation: str) -> ObjectId:
    try:
        return parse_object_id(raw)
    except ValidationError:
        logger.error("%s, can't parse id to ObjectId, id=%r", operation, raw)
        raise


@router.get("", response_model=RespResult[list[ArticleResponse]])
@router.get("/", response_model=RespResult[list[ArticleResponse]], include_in_schema=False)
async def list_articles(
    query: ArticleQuery | None = Body(None),
    article_id: str | None = Query(None, alias="id"),
    keyword: str = Query(""),
    service: ArticleService = Depends(get_article_service),
) -> RespResult[list[ArticleResponse]]:
    """List articles matching an optional id and keyword.

    The filter is read from the JSON body; clients that cannot send a body on
    GET may pass ``id`` and ``keyword`` as query parameters instead.
    """
    if query is None:
        query = ArticleQuery(id=article_id, keyword=keyword)
    oid = _parse_id(query.id, "list_article") if query.id is not None else None

    articles = await service.list_articles(article_id=oid, keyword=query.keyword)
    return RespResult[list[ArticleResponse]].ok(
        [ArticleResponse.from_entity(a) for a in articles]
    )


@router.post("", response_model=RespResult[str])
@router.post("/", response_model=RespResult[str], include_in_schema=False)
async def save_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> RespResult[str]:
    """Create a new article and return its id."""
    article_id = await service.create_article(data)
    return RespResult[str].ok(article_id)


@router.put("/{article_id}", response_model=RespResult[int])
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> RespResult[int]:
    """Overwrite the fields present in the body; omitted fields are kept."""
    oid = _parse_id(article_id, "update_article")
    modified = await service.update_article(oid, data)
    return RespResult[int].ok(modified)


@router.delete("/{article_id}", response_model=RespResult[int])
async def remove_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> RespResult[int]:
    oid = _parse_id(article_id, "remove_article")
    deleted = await service.delete_article(oid)
    return RespResult[int].ok(deleted)


@router.put("/", response_model=RespResult[int], include_in_schema=False)
@router.delete("/", response_model=RespResult[int], include_in_schema=False)
async def reject_missing_id() -> RespResult[int]:
    """PUT/DELETE on the collection itself: the article id is missing."""
    logger.error("update/remove article without id")
    raise ValidationError("id")
