"""Builds MongoDB filter documents for article searches."""

import re
from typing import Any

from bson import ObjectId

from myblog.domain.exceptions import ValidationError

# Field order of the keyword OR-group; matching is unordered.
KEYWORD_FIELDS = ("title", "author", "content")


def build_article_filter(article_id: ObjectId | None = None, keyword: str = "") -> dict[str, Any]:
    """Return a filter matching an optional id and a case-insensitive keyword.

    The id and the keyword group share one filter document, so both must match
    when both are given. With neither, the filter is empty and matches every
    article. The keyword is matched literally as a substring; a NUL byte,
    which MongoDB refuses inside a regex, is rejected as a bad keyword.
    """
    filter_doc: dict[str, Any] = {}
    if article_id is not None:
        filter_doc["_id"] = article_id

    if "\x00" in keyword:
        raise ValidationError("keyword")
    if keyword:
        pattern = re.escape(keyword)
        filter_doc["$or"] = [
            {field: {"$regex": pattern, "$options": "i"}} for field in KEYWORD_FIELDS
        ]
    return filter_doc
