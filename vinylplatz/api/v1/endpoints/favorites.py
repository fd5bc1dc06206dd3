"""
Favorites endpoints - the authenticated user's saved listings.
"""

import uuid

from fastapi import APIRouter

from vinylplatz.core.dependencies import CurrentUser, MarketplaceDep
from vinylplatz.schemas.favorite import FavoriteStatus, FavoriteToggleResponse
from vinylplatz.schemas.vinyl import VinylResponse

router = APIRouter()


@router.get("", response_model=list[VinylResponse])
async def list_favorites(mp: MarketplaceDep, user: CurrentUser):
    return await mp.favorites.list_favorites(user.id)


@router.get("/{vinyl_id}/status", response_model=FavoriteStatus)
async def favorite_status(mp: MarketplaceDep, user: CurrentUser, vinyl_id: uuid.UUID):
    return FavoriteStatus(is_favorited=await mp.favorites.is_favorited(user.id, vinyl_id))


@router.post("/{vinyl_id}", response_model=FavoriteToggleResponse)
async def add_favorite(mp: MarketplaceDep, user: CurrentUser, vinyl_id: uuid.UUID):
    """Idempotent: favoriting twice keeps one entry."""
    await mp.favorites.add_favorite(user.id, vinyl_id)
    return FavoriteToggleResponse(is_favorited=True, message="Vinyl added to favorites")


@router.delete("/{vinyl_id}", response_model=FavoriteToggleResponse)
async def remove_favorite(mp: MarketplaceDep, user: CurrentUser, vinyl_id: uuid.UUID):
    removed = await mp.favorites.remove_favorite(user.id, vinyl_id)
    message = "Vinyl removed from favorites" if removed else "Vinyl was not in favorites"
    return FavoriteToggleResponse(is_favorited=False, message=message)
