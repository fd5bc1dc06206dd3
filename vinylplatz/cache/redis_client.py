"""
Redis client - read-through cache for vinyl detail responses.
Challenge: Connection pooling, fail gracefully when Redis is down.
Design: One lazily created client. Documents are stored as JSON under "<namespace>:<id>" keys.
Every operation goes through _guarded, so a disabled or unreachable Redis reads as a miss.
Writers queue invalidations on the session; session_scope flushes them after commit.
"""

import json
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from vinylplatz.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

T = TypeVar("T")

_redis: Redis | None = None


def cache_key(namespace: str, ident: object) -> str:
    return f"{namespace}:{ident}"


async def get_redis() -> Redis:
    global _redis
    if _redis is None:
        _redis = Redis.from_url(settings.redis_url, encoding="utf-8", decode_responses=True)
    return _redis


async def close_redis() -> None:
    """Release the pool on shutdown."""
    global _redis
    if _redis is not None:
        await _redis.aclose()
        _redis = None


async def _guarded(op: str, key: str, action: Callable[[Redis], Awaitable[T]], fallback: T) -> T:
    if not settings.cache_enabled:
        return fallback
    try:
        return await action(await get_redis())
    except Exception as e:
        logger.debug("cache %s failed: key=%s error=%s", op, key, e)
        return fallback


async def load_document(key: str) -> dict[str, Any] | None:
    """Cached JSON document, or None on miss."""
    raw = await _guarded("get", key, lambda r: r.get(key), None)
    return json.loads(raw) if raw else None


async def store_document(key: str, document: dict[str, Any], ttl_seconds: int | None = None) -> bool:
    ttl = ttl_seconds or settings.cache_ttl_seconds
    payload = json.dumps(document)
    return await _guarded("set", key, lambda r: r.setex(key, ttl, payload), False)


async def invalidate(key: str) -> bool:
    """Drop a key after the underlying row changed."""
    return bool(await _guarded("delete", key, lambda r: r.delete(key), 0))


# Keys queued on a session are deleted only after its transaction commits
PENDING_INVALIDATIONS = "cache.pending_invalidations"


def invalidate_after_commit(session: AsyncSession, keys: Iterable[str]) -> None:
    session.info.setdefault(PENDING_INVALIDATIONS, set()).update(keys)


def discard_invalidations(session: AsyncSession) -> None:
    """Rolled back: the cached documents still match the database."""
    session.info.pop(PENDING_INVALIDATIONS, None)


async def flush_invalidations(session: AsyncSession) -> int:
    keys = session.info.pop(PENDING_INVALIDATIONS, set())
    for key in sorted(keys):
        await invalidate(key)
    return len(keys)
