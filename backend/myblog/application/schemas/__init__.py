from .article import ArticleCreate, ArticleUpdate, ArticleQuery, ArticleResponse
from .envelope import RespResult

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleQuery",
    "ArticleResponse",
    "RespResult",
]
