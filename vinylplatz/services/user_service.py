"""
User service - identity store: accounts, credentials, profiles (SOLID: Single Responsibility).
Challenge: Email uniqueness checked in exactly one place; passwords never handled as hashes here.
Design: The model's before_flush hook hashes whatever plaintext is assigned to `user.password`.
"""

import logging
import uuid

from vinylplatz.core.errors import ConflictError, NotFoundError
from vinylplatz.core.security import verify_password
from vinylplatz.db.models.user import User, UserRole
from vinylplatz.db.repositories.order_repository import OrderRepository
from vinylplatz.db.repositories.user_repository import UserRepository
from vinylplatz.schemas.user import ProfileUpdate, UserCreate, UserUpdate
from vinylplatz.services.vinyl_cache import VinylDetailCache

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository, order_repo: OrderRepository, cache: VinylDetailCache):
        self.user_repo = user_repo
        self.order_repo = order_repo
        self.cache = cache

    async def get_user(self, user_id: uuid.UUID) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def find_by_email(self, email: str) -> User | None:
        return await self.user_repo.get_by_email(email)

    async def list_users(self) -> list[User]:
        return await self.user_repo.list_all()

    async def _ensure_email_free(self, email: str, user_id: uuid.UUID | None = None) -> None:
        existing = await self.user_repo.get_by_email(email)
        if existing is not None and existing.id != user_id:
            raise ConflictError(
                "Email already registered",
                code="EMAIL_IN_USE",
                details={"email": email},
            )

    async def create_user(self, data: UserCreate, role: UserRole = UserRole.USER) -> User:
        """Register a new account. Conflict if the email is taken."""
        await self._ensure_email_free(data.email)
        user = User(
            name=data.name,
            email=data.email,
            profile_image=data.profile_image,
            address=data.address,
            role=role,
        )
        user.password = data.password
        user = await self.user_repo.add(user)
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def verify_credentials(self, email: str, password: str) -> User | None:
        """The user when email and password match, else None."""
        user = await self.user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            return None
        return user

    async def update_profile(self, user_id: uuid.UUID, data: ProfileUpdate) -> User:
        """Apply only the fields present in the patch. A new password is re-hashed on flush."""
        user = await self.get_user(user_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("email") is not None and changes["email"] != user.email:
            await self._ensure_email_free(changes["email"], user.id)
        password = changes.pop("password", None)
        for field, value in changes.items():
            if value is not None or field in ("profile_image", "address"):
                setattr(user, field, value)
        if password:
            user.password = password
        await self.cache.forget_seller(user.id)
        user = await self.user_repo.save(user)
        logger.info("Profile updated", extra={"user_id": user.id})
        return user

    async def update_user(self, user_id: uuid.UUID, data: UserUpdate) -> User:
        """Admin edit. Fields sent as null are left alone."""
        user = await self.get_user(user_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        password = changes.pop("password", None)
        for field, value in changes.items():
            setattr(user, field, value)
        if password:
            user.password = password
        await self.cache.forget_seller(user.id)
        user = await self.user_repo.save(user)
        logger.info("User updated by admin", extra={"user_id": user.id})
        return user

    async def delete_user(self, user_id: uuid.UUID) -> None:
        """
        Admin removal. The account's listings and favorites go with it (FK cascades).
        Users who bought or sold anything are kept: orders are permanent history.
        """
        if await self.order_repo.involves_user(user_id):
            raise ConflictError(
                "User has order history and cannot be deleted",
                code="USER_HAS_ORDERS",
                details={"user_id": str(user_id)},
            )
        await self.cache.forget_seller(user_id)
        if not await self.user_repo.delete_by_id(user_id):
            raise NotFoundError("User", user_id)
        logger.info("User deleted", extra={"user_id": user_id})
