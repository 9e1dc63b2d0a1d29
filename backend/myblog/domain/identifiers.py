"""Parsing of record identifiers received at the API boundary."""

from bson import ObjectId
from bson.errors import InvalidId

from myblog.domain.exceptions import ValidationError


def parse_object_id(raw: str | None, field: str = "id") -> ObjectId:
    """Parse a 24-char hex string into an ObjectId.

    Raises ValidationError naming ``field`` when the value is absent or not a
    valid identifier.
    """
    if not raw:
        raise ValidationError(field)
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError) as exc:
        raise ValidationError(field) from exc
