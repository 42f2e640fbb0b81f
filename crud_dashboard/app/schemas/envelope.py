"""
Response wrappers shared by every endpoint.

Successful responses carry their payload under ``data``; error
responses use ``ErrorBody``.  Keeping both shapes in one place lets
the API client rely on a single contract.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    data: T


class Message(BaseModel):
    message: str


class ErrorBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    message: str
    details: Optional[Any] = None
    path: Optional[str] = None
