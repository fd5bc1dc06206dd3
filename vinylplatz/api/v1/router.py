"""
API v1 router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from vinylplatz.api.v1.endpoints import auth, favorites, genres, health, orders, users, vinyls

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(genres.router, prefix="/genres", tags=["genres"])
api_router.include_router(vinyls.router, prefix="/vinyls", tags=["vinyls"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
