"""Favorites association table - which users bookmarked which vinyls."""

from sqlalchemy import Column, ForeignKey, Table, Uuid

from vinylplatz.db.base import Base

# Composite primary key keeps (user, vinyl) pairs unique; rows go away with either side
user_favorites = Table(
    "user_favorites",
    Base.metadata,
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("vinyl_id", Uuid, ForeignKey("vinyls.id", ondelete="CASCADE"), primary_key=True),
)
