"""
Pydantic models for user records.

On the wire a user is ``{"ID": "1", "Name": "Mario", "Age": 35}``.
The capitalised names are the aliases; the lower‑case field names are
accepted on input too.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class UserPayload(BaseModel):
    """Request body for creating or replacing a user.

    Missing or ``null`` fields take their zero values, and a bare
    ``null`` body is read as ``{}``.  ``ID`` is accepted so that clients
    may send back a record they received, but it is never used: the key
    always comes from the path or from the id generator.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="ID", examples=["1"])
    name: str = Field("", alias="Name", examples=["Mario"])
    age: int = Field(0, alias="Age", examples=[35])

    @model_validator(mode="before")
    @classmethod
    def null_body_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("name", mode="before")
    @classmethod
    def null_name_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("age", mode="before")
    @classmethod
    def null_age_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v

    def to_user(self, user_id: str) -> "UserRead":
        return UserRead(id=user_id, name=self.name, age=self.age)


class UserRead(BaseModel):
    """A stored user record."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., alias="ID")
    name: str = Field(..., alias="Name")
    age: int = Field(..., alias="Age")
