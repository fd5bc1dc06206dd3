"""
Ownership and participation checks shared by every service.
Challenge: One place that decides who may touch a listing or an order.
"""

import uuid

from vinylplatz.core.errors import ForbiddenError
from vinylplatz.db.models.order import Order
from vinylplatz.db.models.vinyl import Vinyl


def ensure_listing_owner(vinyl: Vinyl, user_id: uuid.UUID) -> None:
    if vinyl.seller_id != user_id:
        raise ForbiddenError(
            "You can only modify your own vinyls",
            code="NOT_LISTING_OWNER",
            details={"vinyl_id": str(vinyl.id)},
        )


def ensure_order_party(order: Order, user_id: uuid.UUID) -> None:
    """Buyer or seller may read an order."""
    if user_id not in (order.buyer_id, order.seller_id):
        raise ForbiddenError(
            "You do not have access to this order",
            code="NOT_ORDER_PARTY",
            details={"order_id": str(order.id)},
        )


def ensure_order_seller(order: Order, user_id: uuid.UUID) -> None:
    """Only the seller moves an order through its lifecycle."""
    if order.seller_id != user_id:
        raise ForbiddenError(
            "Only the seller can update the order status",
            code="NOT_ORDER_SELLER",
            details={"order_id": str(order.id)},
        )
