"""
Marketplace - composition root for one request's services.
Challenge: Services depend on each other (orders need the catalog, the catalog needs identity).
Design: Build every repository and service once per session; endpoints pick what they need.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from vinylplatz.db.repositories import GenreRepository, OrderRepository, UserRepository, VinylRepository
from vinylplatz.services.auth_service import AuthService
from vinylplatz.services.favorites_service import FavoritesService
from vinylplatz.services.genre_service import GenreService
from vinylplatz.services.order_service import OrderService
from vinylplatz.services.user_service import UserService
from vinylplatz.services.vinyl_cache import VinylDetailCache
from vinylplatz.services.vinyl_service import VinylService


class Marketplace:
    def __init__(self, session: AsyncSession):
        self.session = session
        user_repo = UserRepository(session)
        vinyl_repo = VinylRepository(session)
        order_repo = OrderRepository(session)
        self.vinyl_cache = VinylDetailCache(vinyl_repo)
        self.users = UserService(user_repo, order_repo, self.vinyl_cache)
        self.auth = AuthService(self.users)
        self.genres = GenreService(GenreRepository(session), self.vinyl_cache)
        self.vinyls = VinylService(vinyl_repo, self.users, self.genres, self.vinyl_cache)
        self.favorites = FavoritesService(user_repo, self.vinyls)
        self.orders = OrderService(order_repo, self.vinyls)
