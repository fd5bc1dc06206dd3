"""
Genre endpoints - public reads, admin-only writes.
"""

import uuid

from fastapi import APIRouter, Query, Response, status

from vinylplatz.core.dependencies import AdminUser, MarketplaceDep
from vinylplatz.schemas.genre import GenreCreate, GenreResponse, GenreUpdate

router = APIRouter()


@router.get("", response_model=list[GenreResponse])
async def list_genres(mp: MarketplaceDep, search: str | None = Query(None, max_length=100)):
    """All genres by name. ?search= filters case-insensitively."""
    return await mp.genres.list_genres(search)


@router.get("/{genre_id}", response_model=GenreResponse)
async def get_genre(mp: MarketplaceDep, genre_id: uuid.UUID):
    return await mp.genres.get_genre(genre_id)


@router.post("", response_model=GenreResponse, status_code=status.HTTP_201_CREATED)
async def create_genre(mp: MarketplaceDep, admin: AdminUser, data: GenreCreate):
    return await mp.genres.create_genre(data)


@router.patch("/{genre_id}", response_model=GenreResponse)
async def update_genre(mp: MarketplaceDep, admin: AdminUser, genre_id: uuid.UUID, data: GenreUpdate):
    return await mp.genres.update_genre(genre_id, data)


@router.delete("/{genre_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_genre(mp: MarketplaceDep, admin: AdminUser, genre_id: uuid.UUID):
    """Vinyls of the genre stay listed with no genre."""
    await mp.genres.delete_genre(genre_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
