from .article_filter import build_article_filter
from .article_service import ArticleService

__all__ = [
    "ArticleService",
    "build_article_filter",
]
