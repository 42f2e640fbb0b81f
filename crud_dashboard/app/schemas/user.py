"""
Pydantic models for user data.

Defines schemas for creating, updating and reading users.  Nested
``address`` and ``company`` blocks are optional on a user but, when
present, every field inside them is required.  Wire names are
camelCase (``catchPhrase``); attributes are snake_case and both
spellings are accepted on input.

Unknown fields are rejected rather than dropped so that typos in a
client payload surface as a 400 instead of being silently ignored.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def check_email(value: Optional[str]) -> Optional[str]:
    if value is not None and not EMAIL_PATTERN.match(value):
        raise ValueError("email must be a valid email address")
    return value


class Geo(BaseModel):
    model_config = ConfigDict(extra="forbid")

    lat: str = Field(..., min_length=1, examples=["-37.3159"])
    lng: str = Field(..., min_length=1, examples=["81.1496"])


class Address(BaseModel):
    model_config = ConfigDict(extra="forbid")

    street: str = Field(..., min_length=1, examples=["Kulas Light"])
    suite: str = Field(..., min_length=1, examples=["Apt. 556"])
    city: str = Field(..., min_length=1, examples=["Gwenborough"])
    zipcode: str = Field(..., min_length=1, examples=["92998-3874"])
    geo: Geo


class Company(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(..., min_length=1, examples=["Romaguera-Crona"])
    catch_phrase: str = Field(..., min_length=1, alias="catchPhrase")
    bs: str = Field(..., min_length=1, examples=["harness real-time e-markets"])


class UserBase(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(..., min_length=1, examples=["Leanne Graham"])
    username: str = Field(..., min_length=1, examples=["Bret"])
    email: str = Field(..., min_length=1, examples=["Sincere@april.biz"])
    phone: Optional[str] = Field(None, examples=["1-770-736-8031 x56442"])
    website: Optional[str] = Field(None, examples=["hildegard.org"])
    address: Optional[Address] = None
    company: Optional[Company] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return check_email(v)


class UserCreate(UserBase):
    """Schema for creating a user."""
    pass


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only provided fields are merged into the
    stored record.  The identity fields may be omitted but not nulled
    out, while the optional contact blocks may be cleared with
    ``null``.  Clients echo the record's ``id`` back with the changes;
    it is accepted and ignored.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1)
    username: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Optional[Address] = None
    company: Optional[Company] = None

    @model_validator(mode="before")
    @classmethod
    def reject_null_identity(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = [key for key in ("name", "username", "email") if key in data and data[key] is None]
            if nulls:
                raise ValueError(f"{', '.join(nulls)} cannot be null")
        return data

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return check_email(v)
