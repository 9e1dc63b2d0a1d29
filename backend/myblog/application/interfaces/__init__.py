from .crud_repository import CrudRepository

__all__ = [
    "CrudRepository",
]
