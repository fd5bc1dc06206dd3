"""
FastAPI application entry point.
Challenge: Mount routes, middleware (CORS), metrics, error handlers, startup events (logging, seed).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from vinylplatz.api.error_handlers import register_error_handlers
from vinylplatz.api.v1.router import api_router
from vinylplatz.cache.redis_client import close_redis
from vinylplatz.config import get_settings
from vinylplatz.core.observability import setup_logging
from vinylplatz.db.session import session_scope
from vinylplatz.services.marketplace import Marketplace
from vinylplatz.services.seed_service import SeedService

logger = logging.getLogger(__name__)


async def run_seed() -> bool:
    """Seed demo data in its own transaction."""
    async with session_scope() as session:
        return await SeedService(Marketplace(session)).run()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging, optional demo seed. Shutdown: release the Redis pool."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.run_seed:
        await run_seed()
    logger.info("%s started", settings.app_name)
    yield
    await close_redis()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Marketplace for second-hand vinyl records: listings, favorites, orders.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")
    register_error_handlers(app)

    return app


app = create_app()
