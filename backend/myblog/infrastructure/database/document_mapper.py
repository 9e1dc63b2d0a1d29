"""Mapping between dataclass records and MongoDB documents."""

from dataclasses import asdict, fields, is_dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class DocumentMappingError(Exception):
    """Raised when a record cannot be converted into a document."""


class DocumentMapper(Generic[T]):
    """Converts records of one dataclass type to and from documents.

    The record's ``id_attr`` attribute is stored as ``_id``. Attributes whose
    value is ``None`` are dropped on the way out, so an insert never stores
    nulls and an update never overwrites a stored value with one.
    """

    def __init__(self, record_type: type[T], id_attr: str = "id"):
        if not is_dataclass(record_type):
            raise TypeError(f"{record_type!r} is not a dataclass")
        self._record_type = record_type
        self._id_attr = id_attr
        self._attr_names = frozenset(f.name for f in fields(record_type))

    def to_document(self, record: T) -> dict[str, Any]:
        if not isinstance(record, self._record_type):
            raise DocumentMappingError(
                f"expected {self._record_type.__name__}, got {type(record).__name__}"
            )
        try:
            values = asdict(record)
        except (TypeError, ValueError) as exc:
            raise DocumentMappingError(f"cannot serialize {record!r}") from exc
        return {
            ("_id" if key == self._id_attr else key): value
            for key, value in values.items()
            if value is not None
        }

    def from_document(self, document: dict[str, Any]) -> T:
        kwargs = {}
        for key, value in document.items():
            name = self._id_attr if key == "_id" else key
            if name in self._attr_names:
                kwargs[name] = value
        return self._record_type(**kwargs)
