"""
Genre repository - taxonomy lookups.
Name comparisons are case-insensitive, matching the search filter.
"""

from sqlalchemy import func, select

from vinylplatz.db.models.genre import Genre
from vinylplatz.db.repositories.base_repository import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    def __init__(self, session):
        super().__init__(session, Genre)

    async def list_by_name(self, search: str | None = None) -> list[Genre]:
        """All genres by name; optional case-insensitive substring filter."""
        stmt = select(Genre).order_by(Genre.name)
        if search:
            stmt = stmt.where(Genre.name.icontains(search, autoescape=True))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> Genre | None:
        """Case-insensitive exact name lookup."""
        result = await self.session.execute(
            select(Genre).where(func.lower(Genre.name) == name.lower())
        )
        return result.scalars().first()
