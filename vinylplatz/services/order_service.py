"""
Order service - purchase workflow and the order status state machine.
Challenge: Consistent orders without locking the listing; only legal status moves.
Design: Price and seller are copied from the vinyl at creation, so later listing
edits (or removal) never rewrite order history.

    pending -> paid | cancelled
    paid -> shipped | cancelled
    shipped -> completed | cancelled
    completed, cancelled: terminal
"""

import logging
import uuid

from vinylplatz.core.errors import InvalidStatusTransitionError, NotFoundError, SelfPurchaseError
from vinylplatz.core.observability import ORDER_STATUS_TRANSITIONS, ORDERS_CREATED
from vinylplatz.db.models.order import Order, OrderStatus
from vinylplatz.db.repositories.order_repository import OrderRepository
from vinylplatz.schemas.order import OrderFilter
from vinylplatz.services.permissions import ensure_order_party, ensure_order_seller
from vinylplatz.services.vinyl_service import VinylService

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PAID, OrderStatus.CANCELLED}),
    OrderStatus.PAID: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def validate_transition(current: OrderStatus, requested: OrderStatus) -> None:
    """Raise InvalidStatusTransitionError unless current -> requested is in the table."""
    if requested not in ALLOWED_TRANSITIONS[current]:
        raise InvalidStatusTransitionError(current.value, requested.value)


class OrderService:
    def __init__(self, order_repo: OrderRepository, vinyls: VinylService):
        self.order_repo = order_repo
        self.vinyls = vinyls

    async def create_order(self, buyer_id: uuid.UUID, vinyl_id: uuid.UUID) -> Order:
        """Place a pending order. The vinyl is not reserved; several orders may target it."""
        vinyl = await self.vinyls.get_vinyl(vinyl_id)
        if vinyl.seller_id == buyer_id:
            raise SelfPurchaseError(vinyl_id)
        order = await self.order_repo.add(
            Order(
                price=vinyl.price,
                status=OrderStatus.PENDING,
                buyer_id=buyer_id,
                seller_id=vinyl.seller_id,
                vinyl_id=vinyl.id,
            )
        )
        ORDERS_CREATED.inc()
        logger.info(
            "Order created",
            extra={"order_id": order.id, "user_id": buyer_id, "vinyl_id": vinyl_id},
        )
        return await self._get(order.id)

    async def _get(self, order_id: uuid.UUID) -> Order:
        order = await self.order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    async def list_orders(self, user_id: uuid.UUID, filters: OrderFilter) -> list[Order]:
        """Buyer or seller by default; exactly one role flag restricts to that role."""
        as_buyer = bool(filters.as_buyer)
        as_seller = bool(filters.as_seller)
        if not as_buyer and not as_seller:
            as_buyer = as_seller = True
        return await self.order_repo.list_for_user(
            user_id, as_buyer=as_buyer, as_seller=as_seller, status=filters.status
        )

    async def get_order(self, order_id: uuid.UUID, user_id: uuid.UUID) -> Order:
        order = await self._get(order_id)
        ensure_order_party(order, user_id)
        return order

    async def update_status(
        self, order_id: uuid.UUID, user_id: uuid.UUID, new_status: OrderStatus
    ) -> Order:
        """Seller-only status change along the state machine."""
        order = await self.get_order(order_id, user_id)
        ensure_order_seller(order, user_id)
        current = order.status
        validate_transition(current, new_status)
        order.status = new_status
        await self.order_repo.save(order)
        ORDER_STATUS_TRANSITIONS.labels(from_status=current.value, to_status=new_status.value).inc()
        logger.info(
            "Order status changed %s -> %s",
            current.value,
            new_status.value,
            extra={"order_id": order_id, "user_id": user_id},
        )
        return await self._get(order_id)
