"""
Order repository - order history queries for buyers and sellers.
"""

import uuid

from sqlalchemy import exists, or_, select

from vinylplatz.db.models.order import Order, OrderStatus
from vinylplatz.db.repositories.base_repository import BaseRepository


class OrderRepository(BaseRepository[Order]):
    def __init__(self, session):
        super().__init__(session, Order)

    async def list_for_user(
        self,
        user_id: uuid.UUID,
        *,
        as_buyer: bool = True,
        as_seller: bool = True,
        status: OrderStatus | None = None,
    ) -> list[Order]:
        """Orders the user takes part in, most recent first. Caller resolves the role flags."""
        stmt = select(Order)
        if as_buyer and not as_seller:
            stmt = stmt.where(Order.buyer_id == user_id)
        elif as_seller and not as_buyer:
            stmt = stmt.where(Order.seller_id == user_id)
        else:
            stmt = stmt.where(or_(Order.buyer_id == user_id, Order.seller_id == user_id))
        if status is not None:
            stmt = stmt.where(Order.status == status)
        result = await self.session.execute(
            stmt.order_by(Order.order_date.desc(), Order.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def involves_user(self, user_id: uuid.UUID) -> bool:
        """True when the user bought or sold anything."""
        result = await self.session.execute(
            select(
                exists().where(or_(Order.buyer_id == user_id, Order.seller_id == user_id))
            )
        )
        return bool(result.scalar())
