"""
Favorites service - the user/vinyl many-to-many ledger.
Challenge: Idempotent add, non-failing remove, no duplicate rows under concurrent toggles.
Design: Mutations load the user row FOR UPDATE, so one user's toggles run one at a time.
"""

import logging
import uuid

from vinylplatz.core.errors import NotFoundError
from vinylplatz.db.models.user import User
from vinylplatz.db.models.vinyl import Vinyl
from vinylplatz.db.repositories.user_repository import UserRepository
from vinylplatz.services.vinyl_service import VinylService

logger = logging.getLogger(__name__)


class FavoritesService:
    def __init__(self, user_repo: UserRepository, vinyls: VinylService):
        self.user_repo = user_repo
        self.vinyls = vinyls

    async def _load_user(self, user_id: uuid.UUID, *, for_update: bool = False) -> User:
        user = await self.user_repo.get_with_favorites(user_id, for_update=for_update)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def list_favorites(self, user_id: uuid.UUID) -> list[Vinyl]:
        user = await self._load_user(user_id)
        return list(user.favorites)

    async def is_favorited(self, user_id: uuid.UUID, vinyl_id: uuid.UUID) -> bool:
        """False for unknown users too; never raises."""
        return await self.user_repo.has_favorite(user_id, vinyl_id)

    async def add_favorite(self, user_id: uuid.UUID, vinyl_id: uuid.UUID) -> bool:
        user = await self._load_user(user_id, for_update=True)
        vinyl = await self.vinyls.get_vinyl(vinyl_id)
        if any(v.id == vinyl.id for v in user.favorites):
            return True
        user.favorites.append(vinyl)
        await self.user_repo.session.flush()
        logger.info("Favorite added", extra={"user_id": user_id, "vinyl_id": vinyl_id})
        return True

    async def remove_favorite(self, user_id: uuid.UUID, vinyl_id: uuid.UUID) -> bool:
        """False (not an error) when the vinyl was not a favorite."""
        user = await self._load_user(user_id, for_update=True)
        kept = [v for v in user.favorites if v.id != vinyl_id]
        if len(kept) == len(user.favorites):
            return False
        user.favorites = kept
        await self.user_repo.session.flush()
        logger.info("Favorite removed", extra={"user_id": user_id, "vinyl_id": vinyl_id})
        return True
