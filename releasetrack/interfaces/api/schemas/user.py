"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=80)
    last_name: str = Field(default="", max_length=80)
    email: EmailStr


class UserRead(BaseModel):
    id: int
    first_name: str
    last_name: str
    display_name: str
    # Legacy rows may hold malformed addresses, so reads are not validated.
    email: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["UserCreate", "UserRead"]
