from .client import build_mongo_client
from .crud_repository import MongoCrudRepository
from .document_mapper import DocumentMapper, DocumentMappingError

__all__ = [
    "build_mongo_client",
    "MongoCrudRepository",
    "DocumentMapper",
    "DocumentMappingError",
]
