"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; database check for readiness.
"""

from fastapi import APIRouter
from sqlalchemy import text

from vinylplatz.config import get_settings
from vinylplatz.db.session import DbSession

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: can the database answer?"""
    await session.execute(text("SELECT 1"))
    return {"status": "ready", "database": "ok"}
