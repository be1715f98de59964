"""Response Envelope — {"body": ..., "message": ...} wrapper for successful responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

RESPONSE_OK = "Response OK!"


class ResponseMessage(BaseModel, Generic[T]):
    body: T
    message: str = RESPONSE_OK
