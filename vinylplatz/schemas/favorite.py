"""Favorite status/toggle responses."""

from pydantic import BaseModel


class FavoriteStatus(BaseModel):
    is_favorited: bool


class FavoriteToggleResponse(FavoriteStatus):
    message: str
