"""
Pydantic models for post data.

``PostCreate`` enforces the content rules (title of at least five
characters, body of at least ten) and ``PostUpdate`` applies the same
rules to whichever fields a partial update carries.  Whether the
owning user exists is not a shape concern and is checked by the
post store.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

TITLE_MIN_LENGTH = 5
BODY_MIN_LENGTH = 10


class PostBase(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    user_id: int = Field(..., alias="userId", examples=[1])
    title: str = Field(..., min_length=TITLE_MIN_LENGTH, examples=["qui est esse"])
    body: str = Field(..., min_length=BODY_MIN_LENGTH, examples=["est rerum tempore vitae"])


class PostCreate(PostBase):
    """Schema for creating a post."""
    pass


class PostRead(PostBase):
    """Schema for reading a post from the API."""

    id: int


class PostUpdate(BaseModel):
    """Schema for updating a post.

    All fields are optional.  Clients commonly echo the post ``id``
    back in the body, so it is accepted, but the stored id never
    changes.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: Optional[int] = None
    user_id: Optional[int] = Field(None, alias="userId")
    title: Optional[str] = Field(None, min_length=TITLE_MIN_LENGTH)
    body: Optional[str] = Field(None, min_length=BODY_MIN_LENGTH)

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = [
                key
                for key in ("userId", "user_id", "title", "body")
                if key in data and data[key] is None
            ]
            if nulls:
                raise ValueError(f"{', '.join(nulls)} cannot be null")
        return data
