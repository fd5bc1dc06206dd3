"""Order request/response schemas."""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from vinylplatz.db.models.order import OrderStatus
from vinylplatz.schemas.user import UserSummary
from vinylplatz.schemas.vinyl import VinylSummary


class OrderCreate(BaseModel):
    vinyl_id: uuid.UUID


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderFilter(BaseModel):
    """Both role flags set (or neither) means 'buyer or seller'."""

    status: OrderStatus | None = None
    as_buyer: bool | None = None
    as_seller: bool | None = None


class OrderResponse(BaseModel):
    id: uuid.UUID
    price: Decimal
    status: OrderStatus
    order_date: datetime
    buyer_id: uuid.UUID
    seller_id: uuid.UUID
    vinyl_id: uuid.UUID
    buyer: UserSummary
    seller: UserSummary
    # None once the seller has removed the listing
    vinyl: VinylSummary | None = None

    model_config = {"from_attributes": True}
