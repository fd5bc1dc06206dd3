"""
SQLAlchemy declarative base and metadata.
Challenge: Single place for table definitions and migrations.
"""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    """Timezone-aware timestamp for Python-side column defaults."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all ORM models. Enables Alembic migrations."""

    pass


def enum_values(enum_cls) -> list[str]:
    """Persist enum values ('Near Mint') rather than member names ('NEAR_MINT')."""
    return [member.value for member in enum_cls]
