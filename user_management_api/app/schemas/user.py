"""
Pydantic models for user data.

Field names are snake_case in Python and camelCase on the wire.  The
stored document uses the same camelCase keys as the JSON payload, with
the identifier kept under MongoDB's ``_id``.

Request models only perform structural decoding: every field is an
optional string, and a value of any other JSON type rejects the
request.  Keys that are absent (or ``null``) are left out of the write
entirely, which is what lets ``UserUpdate`` tell "not sent" apart from
"sent as an empty string".
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.identifiers import encode_id


class UserBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = Field(None, examples=["jdoe"])
    full_name: Optional[str] = Field(None, alias="fullName", examples=["John Doe"])
    email: Optional[str] = Field(None, examples=["john@example.com"])
    gender: Optional[str] = Field(None, examples=["male"])
    birth_date: Optional[str] = Field(None, alias="birthDate", examples=["1990-01-31"])
    phone_number: Optional[str] = Field(None, alias="phoneNumber", examples=["+1 555 0100"])

    def to_document(self) -> Dict[str, Any]:
        """Return the fields the client actually supplied, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class UserCreate(UserBase):
    """Schema for creating a user.  The store assigns ``id``."""


class UserUpdate(UserBase):
    """Schema for updating a user.

    Only the keys present in the request body are written; an ``id`` in
    the body is ignored because identifiers are immutable.
    """


class User(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str = ""
    full_name: str = Field("", alias="fullName")
    email: str = ""
    gender: str = ""
    birth_date: str = Field("", alias="birthDate")
    phone_number: str = Field("", alias="phoneNumber")

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "User":
        data = {key: value for key, value in document.items() if key != "_id"}
        data["id"] = encode_id(document["_id"])
        return cls.model_validate(data)
