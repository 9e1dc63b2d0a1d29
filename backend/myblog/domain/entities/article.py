"""Domain entities: plain Python records stored as documents."""

from dataclasses import dataclass
from typing import ClassVar

from bson import ObjectId


@dataclass
class Article:
    """A blog article.

    Text fields left as ``None`` are treated as absent: they are never written
    to the stored document, which is what makes updates partial.
    """

    COLLECTION_NAME: ClassVar[str] = "article"

    title: str | None = None
    author: str | None = None
    content: str | None = None
    id: ObjectId | None = None
