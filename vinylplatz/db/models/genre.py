"""
Genre model - taxonomy entry for vinyl listings.
"""

import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from vinylplatz.db.base import Base


class Genre(Base):
    """Named genre. Names are unique regardless of case (enforced by GenreService)."""

    __tablename__ = "genres"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name={self.name})>"
