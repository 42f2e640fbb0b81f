"""
Error taxonomy shared by the stores and the HTTP layer.

Stores raise these exceptions; ``main.create_app`` registers handlers
that turn them into JSON error responses.  Each class carries the HTTP
status it maps to so new error kinds only need a subclass.
"""

from typing import Any, Optional

from fastapi import status


class StoreError(Exception):
    """Base class for errors raised by the in‑memory stores."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(StoreError, LookupError):
    """The requested entity id is not present in the store."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidInputError(StoreError, ValueError):
    """The payload is well formed but violates a store rule.

    Raised for referential violations such as a post naming a user
    that does not exist.
    """

    status_code = status.HTTP_400_BAD_REQUEST
