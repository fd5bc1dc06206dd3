"""
Vinyl model - a record listed for sale by its seller.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Numeric,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vinylplatz.db.base import Base, enum_values, utcnow

if TYPE_CHECKING:
    from vinylplatz.db.models.genre import Genre
    from vinylplatz.db.models.user import User


class VinylCondition(str, Enum):
    """Record grading, declared best to worst."""

    MINT = "Mint"
    NEAR_MINT = "Near Mint"
    EXCELLENT = "Excellent"
    VERY_GOOD_PLUS = "Very Good Plus"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


# Rank used when sorting by condition (0 = best)
CONDITION_RANK = {condition.value: rank for rank, condition in enumerate(VinylCondition)}


class Vinyl(Base):
    """Vinyl listing. Seller and genre are eager-loaded (selectin) for API responses."""

    __tablename__ = "vinyls"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_vinyls_price_non_negative"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    artist: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    release_year: Mapped[int | None] = mapped_column(nullable=True)
    condition: Mapped[VinylCondition] = mapped_column(
        SAEnum(VinylCondition, name="vinyl_condition", values_callable=enum_values),
        nullable=False,
        default=VinylCondition.GOOD,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # Listings go with the seller's account
    seller_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    genre_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("genres.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow
    )

    seller: Mapped["User"] = relationship("User", lazy="selectin")
    genre: Mapped["Genre | None"] = relationship("Genre", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Vinyl(id={self.id}, title={self.title})>"
