"""Generic CRUD repository backed by a pymongo async collection."""

import logging
from typing import Any, TypeVar

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from myblog.application.interfaces import CrudRepository
from myblog.domain.exceptions import InternalError
from myblog.infrastructure.database.document_mapper import DocumentMapper, DocumentMappingError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MongoCrudRepository(CrudRepository[T]):
    """Implements the CrudRepository port for any dataclass record type.

    A concrete repository is an instance bound to one collection handle and one
    record type, e.g. ``MongoCrudRepository(db["article"], Article)``. Driver
    and mapping failures are logged here and re-raised as ``InternalError``.
    """

    def __init__(self, collection: AsyncCollection, record_type: type[T]):
        self._collection = collection
        self._mapper = DocumentMapper(record_type)

    @property
    def collection_name(self) -> str:
        return self._collection.name

    async def list_with_filter(self, filter_doc: dict[str, Any]) -> list[T]:
        try:
            cursor = self._collection.find(filter_doc)
            return [self._mapper.from_document(document) async for document in cursor]
        except (PyMongoError, TypeError) as exc:
            logger.exception("[%s] list_with_filter failed, filter=%s", self.collection_name, filter_doc)
            raise InternalError(exc) from exc

    async def save(self, record: T) -> str:
        try:
            document = self._mapper.to_document(record)
            result = await self._collection.insert_one(document)
        except (PyMongoError, DocumentMappingError) as exc:
            logger.exception("[%s] save failed", self.collection_name)
            raise InternalError(exc) from exc

        inserted_id = result.inserted_id
        if not isinstance(inserted_id, ObjectId):
            logger.error("[%s] save returned no ObjectId, got %r", self.collection_name, inserted_id)
            raise InternalError()
        return str(inserted_id)

    async def update_by_id(self, record_id: ObjectId, record: T) -> int:
        try:
            document = self._mapper.to_document(record)
        except DocumentMappingError as exc:
            logger.exception("[%s] update_by_id failed to map record, id=%s", self.collection_name, record_id)
            raise InternalError(exc) from exc
        # _id is immutable once stored
        document.pop("_id", None)
        if not document:
            logger.debug("[%s] update_by_id with no fields set, id=%s", self.collection_name, record_id)
            return 0

        try:
            result = await self._collection.update_one({"_id": record_id}, {"$set": document})
        except PyMongoError as exc:
            logger.exception("[%s] update_by_id failed, id=%s", self.collection_name, record_id)
            raise InternalError(exc) from exc
        return result.modified_count

    async def remove_by_id(self, record_id: ObjectId) -> int:
        try:
            result = await self._collection.delete_one({"_id": record_id})
        except PyMongoError as exc:
            logger.exception("[%s] remove_by_id failed, id=%s", self.collection_name, record_id)
            raise InternalError(exc) from exc
        return result.deleted_count
