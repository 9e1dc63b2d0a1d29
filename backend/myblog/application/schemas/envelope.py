"""Uniform response envelope wrapping every article API response."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class RespResult(BaseModel, Generic[T]):
    """``{code, message, data}``: code 0 means success, ``data`` is null on error."""

    code: int = 0
    message: str = "ok"
    data: T | None = None

    @classmethod
    def ok(cls, data: T) -> "RespResult[T]":
        return cls(code=0, message="ok", data=data)

    @classmethod
    def err(cls, code: int, message: str) -> "RespResult[T]":
        return cls(code=code, message=message, data=None)
