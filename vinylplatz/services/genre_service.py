"""
Genre service - taxonomy CRUD with case-insensitive name uniqueness.
"""

import logging
import uuid

from vinylplatz.core.errors import ConflictError, NotFoundError
from vinylplatz.db.models.genre import Genre
from vinylplatz.db.repositories.genre_repository import GenreRepository
from vinylplatz.schemas.genre import GenreCreate, GenreUpdate
from vinylplatz.services.vinyl_cache import VinylDetailCache

logger = logging.getLogger(__name__)


class GenreService:
    def __init__(self, genre_repo: GenreRepository, cache: VinylDetailCache):
        self.genre_repo = genre_repo
        self.cache = cache

    async def _ensure_name_free(self, name: str, genre_id: uuid.UUID | None = None) -> None:
        existing = await self.genre_repo.get_by_name(name)
        if existing is not None and existing.id != genre_id:
            raise ConflictError(
                f"Genre '{name}' already exists",
                code="GENRE_NAME_TAKEN",
                details={"name": name},
            )

    async def list_genres(self, search: str | None = None) -> list[Genre]:
        return await self.genre_repo.list_by_name(search)

    async def get_genre(self, genre_id: uuid.UUID) -> Genre:
        genre = await self.genre_repo.get_by_id(genre_id)
        if genre is None:
            raise NotFoundError("Genre", genre_id)
        return genre

    async def create_genre(self, data: GenreCreate) -> Genre:
        await self._ensure_name_free(data.name)
        genre = await self.genre_repo.add(Genre(name=data.name, description=data.description))
        logger.info("Genre created: %s", genre.name)
        return genre

    async def update_genre(self, genre_id: uuid.UUID, data: GenreUpdate) -> Genre:
        """Renaming a genre to its own current name is allowed."""
        genre = await self.get_genre(genre_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("name") is not None:
            await self._ensure_name_free(changes["name"], genre.id)
            genre.name = changes["name"]
        if "description" in changes:
            genre.description = changes["description"]
        await self.cache.forget_genre(genre_id)
        return await self.genre_repo.save(genre)

    async def delete_genre(self, genre_id: uuid.UUID) -> None:
        # Vinyls keep existing; the FK sets their genre_id to null
        await self.cache.forget_genre(genre_id)
        if not await self.genre_repo.delete_by_id(genre_id):
            raise NotFoundError("Genre", genre_id)
        logger.info("Genre deleted: %s", genre_id)
