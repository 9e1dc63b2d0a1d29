"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from pydantic import AliasChoices, BaseModel, Field

from myblog.domain.entities import Article


class ArticleCreate(BaseModel):
    """Schema for creating a new article. A client-sent ``_id`` is ignored."""

    title: str = Field(..., examples=["Hello MongoDB"])
    author: str = Field(..., examples=["jane"])
    content: str = Field(..., examples=["First post on the new blog."])

    def to_entity(self) -> Article:
        return Article(title=self.title, author=self.author, content=self.content)


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article: all fields optional.

    Omitted fields keep their stored value.
    """

    title: str | None = None
    author: str | None = None
    content: str | None = None

    def to_entity(self) -> Article:
        return Article(title=self.title, author=self.author, content=self.content)


class ArticleQuery(BaseModel):
    """Filter for listing articles. An empty keyword disables keyword matching."""

    id: str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    keyword: str = ""


class ArticleResponse(BaseModel):
    """Schema returned to the client; the identifier is rendered as ``_id`` hex."""

    id: str | None = Field(None, alias="_id")
    title: str | None = None
    author: str | None = None
    content: str | None = None

    model_config = {"populate_by_name": True}

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleResponse":
        return cls(
            id=str(article.id) if article.id is not None else None,
            title=article.title,
            author=article.author,
            content=article.content,
        )
