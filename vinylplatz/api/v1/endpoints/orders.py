"""
Order endpoints - place orders, read history, move orders through their lifecycle.
Challenge: Buyers and sellers see the same order; only the seller changes its status.
"""

import uuid

from fastapi import APIRouter, Query

from vinylplatz.core.dependencies import CurrentUser, MarketplaceDep
from vinylplatz.db.models.order import OrderStatus
from vinylplatz.schemas.order import OrderCreate, OrderFilter, OrderResponse, OrderStatusUpdate

router = APIRouter()


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    mp: MarketplaceDep,
    user: CurrentUser,
    status: OrderStatus | None = None,
    as_buyer: bool | None = Query(None, alias="asBuyer"),
    as_seller: bool | None = Query(None, alias="asSeller"),
):
    """Orders where the user is buyer or seller, newest first."""
    filters = OrderFilter(status=status, as_buyer=as_buyer, as_seller=as_seller)
    return await mp.orders.list_orders(user.id, filters)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(mp: MarketplaceDep, user: CurrentUser, order_id: uuid.UUID):
    return await mp.orders.get_order(order_id, user.id)


@router.post("", response_model=OrderResponse, status_code=201)
async def create_order(mp: MarketplaceDep, user: CurrentUser, data: OrderCreate):
    """Buy a vinyl at its current price. Buying your own listing is rejected."""
    return await mp.orders.create_order(user.id, data.vinyl_id)


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    mp: MarketplaceDep, user: CurrentUser, order_id: uuid.UUID, data: OrderStatusUpdate
):
    return await mp.orders.update_status(order_id, user.id, data.status)
