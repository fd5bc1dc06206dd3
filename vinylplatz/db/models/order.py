"""
Order model - purchase snapshot between a buyer and a seller.

`vinyl_id` is a plain reference (no foreign key): orders are never deleted and
keep pointing at a listing even after the seller removes it.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, Numeric, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vinylplatz.db.base import Base, enum_values, utcnow

if TYPE_CHECKING:
    from vinylplatz.db.models.user import User
    from vinylplatz.db.models.vinyl import Vinyl


class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Order(Base):
    """Order entity. Price is copied from the vinyl when the order is placed."""

    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[OrderStatus] = mapped_column(
        SAEnum(OrderStatus, name="order_status", values_callable=enum_values),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True
    )
    # Parties of an order cannot be deleted
    buyer_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    seller_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    vinyl_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    buyer: Mapped["User"] = relationship("User", foreign_keys=[buyer_id], lazy="selectin")
    seller: Mapped["User"] = relationship("User", foreign_keys=[seller_id], lazy="selectin")
    vinyl: Mapped["Vinyl | None"] = relationship(
        "Vinyl",
        primaryjoin="foreign(Order.vinyl_id) == Vinyl.id",
        viewonly=True,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, status={self.status})>"
