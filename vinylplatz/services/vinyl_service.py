"""
Vinyl service - catalog listings (SOLID: Single Responsibility).
Challenge: Orchestrate repository, cache, ownership checks; keep controllers thin.
Design: Detail reads go through Redis (read-through); writes queue the cached detail for
invalidation once the transaction commits.
"""

import logging
import math
import uuid

from vinylplatz.config import get_settings
from vinylplatz.core.errors import NotFoundError
from vinylplatz.db.models.vinyl import Vinyl
from vinylplatz.db.repositories.vinyl_repository import VinylRepository
from vinylplatz.schemas.vinyl import VinylCreate, VinylFilter, VinylPage, VinylResponse, VinylUpdate
from vinylplatz.services.genre_service import GenreService
from vinylplatz.services.permissions import ensure_listing_owner
from vinylplatz.services.user_service import UserService
from vinylplatz.services.vinyl_cache import VinylDetailCache

logger = logging.getLogger(__name__)
settings = get_settings()


class VinylService:
    """Handles listing use cases: browse, detail, create, update, delete."""

    def __init__(
        self,
        vinyl_repo: VinylRepository,
        users: UserService,
        genres: GenreService,
        cache: VinylDetailCache,
    ):
        self.vinyl_repo = vinyl_repo
        self.cache = cache
        self.users = users
        self.genres = genres

    async def list_vinyls(
        self,
        filters: VinylFilter,
        page: int = 1,
        limit: int | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> VinylPage:
        """One 1-indexed page of the filtered catalog."""
        page = max(page, 1)
        limit = min(max(limit or settings.default_page_size, 1), settings.max_page_size)
        items, total = await self.vinyl_repo.search(
            filters,
            offset=(page - 1) * limit,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        return VinylPage(
            items=[VinylResponse.model_validate(v) for v in items],
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
        )

    async def get_vinyl(self, vinyl_id: uuid.UUID) -> Vinyl:
        vinyl = await self.vinyl_repo.get_by_id(vinyl_id)
        if vinyl is None:
            raise NotFoundError("Vinyl", vinyl_id)
        return vinyl

    async def get_vinyl_detail(self, vinyl_id: uuid.UUID) -> VinylResponse:
        """Detail read. Uses Redis cache to reduce DB load."""
        cached = await self.cache.get(vinyl_id)
        if cached is not None:
            return VinylResponse.model_validate(cached)
        resp = VinylResponse.model_validate(await self.get_vinyl(vinyl_id))
        await self.cache.put(vinyl_id, resp.model_dump(mode="json"))
        return resp

    async def list_seller_vinyls(self, seller_id: uuid.UUID) -> list[Vinyl]:
        return await self.vinyl_repo.list_by_seller(seller_id)

    async def create_vinyl(self, seller_id: uuid.UUID, data: VinylCreate) -> Vinyl:
        """List a vinyl for sale. Seller and genre (when given) must exist."""
        await self.users.get_user(seller_id)
        if data.genre_id is not None:
            await self.genres.get_genre(data.genre_id)
        vinyl = await self.vinyl_repo.add(Vinyl(seller_id=seller_id, **data.model_dump()))
        logger.info("Vinyl listed", extra={"vinyl_id": vinyl.id, "user_id": seller_id})
        # Reload so seller and genre are populated in the async context
        return await self.get_vinyl(vinyl.id)

    async def update_vinyl(self, vinyl_id: uuid.UUID, user_id: uuid.UUID, data: VinylUpdate) -> Vinyl:
        """Partial update by the owner. genre_id: null clears the genre."""
        vinyl = await self.get_vinyl(vinyl_id)
        ensure_listing_owner(vinyl, user_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("genre_id") is not None and changes["genre_id"] != vinyl.genre_id:
            await self.genres.get_genre(changes["genre_id"])
        for field, value in changes.items():
            setattr(vinyl, field, value)
        await self.vinyl_repo.save(vinyl)
        self.cache.forget(vinyl_id)
        logger.info("Vinyl updated", extra={"vinyl_id": vinyl_id, "user_id": user_id})
        return await self.get_vinyl(vinyl_id)

    async def delete_vinyl(self, vinyl_id: uuid.UUID, user_id: uuid.UUID) -> None:
        vinyl = await self.get_vinyl(vinyl_id)
        ensure_listing_owner(vinyl, user_id)
        if not await self.vinyl_repo.delete_by_id(vinyl_id):
            raise NotFoundError("Vinyl", vinyl_id)
        self.cache.forget(vinyl_id)
        logger.info("Vinyl removed", extra={"vinyl_id": vinyl_id, "user_id": user_id})
