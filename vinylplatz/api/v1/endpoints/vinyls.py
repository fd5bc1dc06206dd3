"""
Vinyl listing endpoints - RESTful resource (GET/POST/PATCH/DELETE).
Challenge: Filtering, sorting, pagination, ownership, 404 handling.
Design: Thin controller; service layer holds business logic.
"""

import uuid
from decimal import Decimal

from fastapi import APIRouter, Query, Response, status

from vinylplatz.config import get_settings
from vinylplatz.core.dependencies import CurrentUser, MarketplaceDep
from vinylplatz.db.models.vinyl import VinylCondition
from vinylplatz.schemas.vinyl import VinylCreate, VinylFilter, VinylPage, VinylResponse, VinylUpdate

router = APIRouter()
settings = get_settings()


@router.get("", response_model=VinylPage)
async def list_vinyls(
    mp: MarketplaceDep,
    title: str | None = None,
    artist: str | None = None,
    genre_id: uuid.UUID | None = Query(None, alias="genreId"),
    seller_id: uuid.UUID | None = Query(None, alias="sellerId"),
    condition: VinylCondition | None = None,
    min_price: Decimal | None = Query(None, ge=0, alias="minPrice"),
    max_price: Decimal | None = Query(None, ge=0, alias="maxPrice"),
    release_year: int | None = Query(None, alias="releaseYear"),
    min_release_year: int | None = Query(None, alias="minReleaseYear"),
    max_release_year: int | None = Query(None, alias="maxReleaseYear"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
):
    """
    Browse the catalog. Query parameters use the web client's camelCase names:
    GET /vinyls?artist=miles&minPrice=20&page=2&sortBy=price&sortOrder=asc
    """
    filters = VinylFilter(
        title=title,
        artist=artist,
        genre_id=genre_id,
        seller_id=seller_id,
        condition=condition,
        min_price=min_price,
        max_price=max_price,
        release_year=release_year,
        min_release_year=min_release_year,
        max_release_year=max_release_year,
    )
    return await mp.vinyls.list_vinyls(filters, page, limit, sort_by, sort_order)


@router.get("/seller/me", response_model=list[VinylResponse])
async def my_vinyls(mp: MarketplaceDep, user: CurrentUser):
    """Listings of the authenticated seller, newest first."""
    return await mp.vinyls.list_seller_vinyls(user.id)


@router.get("/{vinyl_id}", response_model=VinylResponse)
async def get_vinyl(mp: MarketplaceDep, vinyl_id: uuid.UUID):
    """Single listing. Uses Redis cache for performance."""
    return await mp.vinyls.get_vinyl_detail(vinyl_id)


@router.post("", response_model=VinylResponse, status_code=status.HTTP_201_CREATED)
async def create_vinyl(mp: MarketplaceDep, user: CurrentUser, data: VinylCreate):
    """List a vinyl; the seller is always the authenticated user."""
    return await mp.vinyls.create_vinyl(user.id, data)


@router.patch("/{vinyl_id}", response_model=VinylResponse)
async def update_vinyl(mp: MarketplaceDep, user: CurrentUser, vinyl_id: uuid.UUID, data: VinylUpdate):
    return await mp.vinyls.update_vinyl(vinyl_id, user.id, data)


@router.delete("/{vinyl_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vinyl(mp: MarketplaceDep, user: CurrentUser, vinyl_id: uuid.UUID):
    await mp.vinyls.delete_vinyl(vinyl_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
