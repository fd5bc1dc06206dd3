"""
User model - identity, credentials, role, and the favorites collection.

Passwords: assigning `user.password = "plain"` only parks the plaintext in a
transient slot. The before_flush hook below hashes it into `hashed_password`
and clears the slot, so a stored hash is never hashed twice.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum as SAEnum, String, Uuid, event, func, inspect
from sqlalchemy.orm import Mapped, Session, mapped_column, relationship
from sqlalchemy.orm.attributes import flag_dirty

from vinylplatz.core.security import hash_password
from vinylplatz.db.base import Base, enum_values, utcnow
from vinylplatz.db.models.favorite import user_favorites

if TYPE_CHECKING:
    from vinylplatz.db.models.vinyl import Vinyl


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(Base):
    """User entity. Sells vinyls, places orders, keeps favorites."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, name="user_role", values_callable=enum_values),
        nullable=False,
        default=UserRole.USER,
    )
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )

    # Loaded explicitly by the favorites queries; never implicitly
    favorites: Mapped[list["Vinyl"]] = relationship(
        "Vinyl",
        secondary=user_favorites,
        lazy="raise",
        passive_deletes=True,
    )

    # Plaintext waiting for the next flush; not a column
    _pending_password = None

    @property
    def password(self) -> str | None:
        """Plaintext set since the last flush, or None once it has been hashed."""
        return self._pending_password

    @password.setter
    def password(self, plain: str) -> None:
        self._pending_password = plain
        if inspect(self).persistent:
            # No column changed yet; make sure the flush still visits this user
            flag_dirty(self)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"


@event.listens_for(Session, "before_flush")
def _hash_pending_passwords(session: Session, flush_context, instances) -> None:
    """Hash new plaintext passwords on insert and update."""
    for obj in list(session.new) + list(session.dirty):
        if isinstance(obj, User) and obj._pending_password is not None:
            obj.hashed_password = hash_password(obj._pending_password)
            obj._pending_password = None
