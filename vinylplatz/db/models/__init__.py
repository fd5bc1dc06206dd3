# ORM models: importing the package registers every mapper (needed for string relationships)

from vinylplatz.db.models.favorite import user_favorites
from vinylplatz.db.models.genre import Genre
from vinylplatz.db.models.order import Order, OrderStatus
from vinylplatz.db.models.user import User, UserRole
from vinylplatz.db.models.vinyl import CONDITION_RANK, Vinyl, VinylCondition

__all__ = [
    "CONDITION_RANK",
    "Genre",
    "Order",
    "OrderStatus",
    "User",
    "UserRole",
    "Vinyl",
    "VinylCondition",
    "user_favorites",
]
