"""
User repository - encapsulates all user data access (SOLID: Single Responsibility).
Challenge: Keep queries in one place for optimization and reuse.
Also owns the favorites association, which hangs off the user row.
"""

import uuid

from sqlalchemy import exists, select
from sqlalchemy.orm import selectinload

from vinylplatz.db.models.favorite import user_favorites
from vinylplatz.db.models.user import User
from vinylplatz.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with domain logic."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email - used for authentication and uniqueness checks."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[User]:
        """All users, oldest registration first (admin view)."""
        result = await self.session.execute(select(User).order_by(User.registration_date))
        return list(result.scalars().all())

    async def get_with_favorites(self, id: uuid.UUID, *, for_update: bool = False) -> User | None:
        """
        Load a user with favorites (and their seller/genre) in two extra queries.
        for_update locks the user row so one user's favorite toggles run one at a time.
        """
        stmt = (
            select(User)
            .where(User.id == id)
            .options(selectinload(User.favorites))
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def has_favorite(self, user_id: uuid.UUID, vinyl_id: uuid.UUID) -> bool:
        """Single EXISTS check on the association table."""
        result = await self.session.execute(
            select(
                exists().where(
                    user_favorites.c.user_id == user_id,
                    user_favorites.c.vinyl_id == vinyl_id,
                )
            )
        )
        return bool(result.scalar())
