"""User request/response schemas - API contract and validation."""

import uuid
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from vinylplatz.db.models.user import UserRole


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr


class UserCreate(UserBase):
    # bcrypt accepts max 72 bytes; longer passwords cause 500. Validate here for a clear 400.
    password: str = Field(..., min_length=6, max_length=72)
    profile_image: str | None = Field(None, max_length=500)
    address: str | None = Field(None, max_length=500)


class ProfileUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=6, max_length=72)
    profile_image: str | None = Field(None, max_length=500)
    address: str | None = Field(None, max_length=500)


class UserUpdate(BaseModel):
    """Admin edit of any account. The email only changes through the owner's profile."""

    name: str | None = Field(None, min_length=1, max_length=100)
    password: str | None = Field(None, min_length=6, max_length=72)
    profile_image: str | None = Field(None, max_length=500)
    address: str | None = Field(None, max_length=500)
    role: UserRole | None = None


class UserSummary(BaseModel):
    """Public identity embedded in listings and orders. No contact details."""

    id: uuid.UUID
    name: str

    model_config = {"from_attributes": True}


class UserResponse(UserSummary):
    email: str
    profile_image: str | None = None
    address: str | None = None
    role: UserRole
    registration_date: datetime
