"""Vinyl request/response schemas - REST API contract, listing filter and page shape."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from vinylplatz.db.models.vinyl import VinylCondition
from vinylplatz.schemas.genre import GenreResponse
from vinylplatz.schemas.user import UserSummary

MIN_RELEASE_YEAR = 1900


def _check_release_year(value: int | None) -> int | None:
    if value is not None and not MIN_RELEASE_YEAR <= value <= date.today().year:
        raise ValueError(f"release_year must be between {MIN_RELEASE_YEAR} and {date.today().year}")
    return value


class VinylCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    artist: str = Field(..., min_length=1, max_length=255)
    release_year: int | None = None
    condition: VinylCondition = VinylCondition.GOOD
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    description: str | None = None
    cover_image_url: str | None = Field(None, max_length=500)
    genre_id: uuid.UUID | None = None

    check_release_year = field_validator("release_year")(_check_release_year)


class VinylUpdate(BaseModel):
    """Partial update: only fields present in the body are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)
    artist: str | None = Field(None, min_length=1, max_length=255)
    release_year: int | None = None
    condition: VinylCondition | None = None
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    description: str | None = None
    cover_image_url: str | None = Field(None, max_length=500)
    genre_id: uuid.UUID | None = None

    check_release_year = field_validator("release_year")(_check_release_year)

    @model_validator(mode="after")
    def required_fields_not_null(self):
        for name in ("title", "artist", "condition", "price"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class VinylResponse(BaseModel):
    id: uuid.UUID
    title: str
    artist: str
    release_year: int | None = None
    condition: VinylCondition
    price: Decimal
    description: str | None = None
    cover_image_url: str | None = None
    seller_id: uuid.UUID
    genre_id: uuid.UUID | None = None
    seller: UserSummary
    genre: GenreResponse | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class VinylSummary(BaseModel):
    """Listing reference embedded in orders."""

    id: uuid.UUID
    title: str
    artist: str
    cover_image_url: str | None = None

    model_config = {"from_attributes": True}


class VinylFilter(BaseModel):
    """Catalog filter. An exact release_year wins over the min/max range."""

    title: str | None = None
    artist: str | None = None
    genre_id: uuid.UUID | None = None
    seller_id: uuid.UUID | None = None
    condition: VinylCondition | None = None
    min_price: Decimal | None = Field(None, ge=0)
    max_price: Decimal | None = Field(None, ge=0)
    release_year: int | None = None
    min_release_year: int | None = None
    max_release_year: int | None = None


class VinylPage(BaseModel):
    items: list[VinylResponse]
    total: int
    page: int
    limit: int
    total_pages: int
