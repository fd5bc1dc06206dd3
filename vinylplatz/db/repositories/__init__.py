# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from vinylplatz.db.repositories.genre_repository import GenreRepository
from vinylplatz.db.repositories.order_repository import OrderRepository
from vinylplatz.db.repositories.user_repository import UserRepository
from vinylplatz.db.repositories.vinyl_repository import VinylRepository

__all__ = ["UserRepository", "GenreRepository", "VinylRepository", "OrderRepository"]
