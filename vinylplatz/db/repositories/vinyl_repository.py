"""
Vinyl repository - catalog queries: filtering, sorting, pagination (SOLID: Single Responsibility).
Challenge: Database query performance; count and page in two cheap queries, no N+1
(seller and genre are selectin-loaded by the mapper).
"""

import uuid

from sqlalchemy import String, case, cast, func, select
from sqlalchemy.sql.elements import ColumnElement

from vinylplatz.db.models.vinyl import CONDITION_RANK, Vinyl
from vinylplatz.db.repositories.base_repository import BaseRepository
from vinylplatz.schemas.vinyl import VinylFilter

DEFAULT_SORT = "created_at"

# Allow-list for sort_by. camelCase keys mirror the names the web client sends.
SORT_COLUMNS: dict[str, ColumnElement] = {
    "title": Vinyl.title,
    "artist": Vinyl.artist,
    "price": Vinyl.price,
    "condition": case(CONDITION_RANK, value=cast(Vinyl.condition, String)),
    "release_year": Vinyl.release_year,
    "releaseYear": Vinyl.release_year,
    "created_at": Vinyl.created_at,
    "createdAt": Vinyl.created_at,
}


def _filter_clauses(filters: VinylFilter) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = []
    if filters.title:
        clauses.append(Vinyl.title.icontains(filters.title, autoescape=True))
    if filters.artist:
        clauses.append(Vinyl.artist.icontains(filters.artist, autoescape=True))
    if filters.genre_id:
        clauses.append(Vinyl.genre_id == filters.genre_id)
    if filters.seller_id:
        clauses.append(Vinyl.seller_id == filters.seller_id)
    if filters.condition:
        clauses.append(Vinyl.condition == filters.condition)
    if filters.min_price is not None:
        clauses.append(Vinyl.price >= filters.min_price)
    if filters.max_price is not None:
        clauses.append(Vinyl.price <= filters.max_price)
    if filters.release_year is not None:
        clauses.append(Vinyl.release_year == filters.release_year)
    else:
        if filters.min_release_year is not None:
            clauses.append(Vinyl.release_year >= filters.min_release_year)
        if filters.max_release_year is not None:
            clauses.append(Vinyl.release_year <= filters.max_release_year)
    return clauses


def _order_by(sort_by: str | None, sort_order: str | None) -> ColumnElement:
    """Unknown sort_by falls back to created_at; unknown sort_order falls back to desc."""
    column = SORT_COLUMNS.get(sort_by or DEFAULT_SORT, SORT_COLUMNS[DEFAULT_SORT])
    if (sort_order or "").lower() == "asc":
        return column.asc()
    return column.desc()


class VinylRepository(BaseRepository[Vinyl]):
    def __init__(self, session):
        super().__init__(session, Vinyl)

    async def search(
        self,
        filters: VinylFilter,
        *,
        offset: int,
        limit: int,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> tuple[list[Vinyl], int]:
        """Return one page of matching vinyls and the total match count."""
        clauses = _filter_clauses(filters)
        total = await self.session.scalar(
            select(func.count()).select_from(Vinyl).where(*clauses)
        )
        result = await self.session.execute(
            select(Vinyl)
            .where(*clauses)
            .order_by(_order_by(sort_by, sort_order), Vinyl.id)
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all()), total or 0

    async def list_by_seller(self, seller_id: uuid.UUID) -> list[Vinyl]:
        """A seller's own listings, newest first."""
        result = await self.session.execute(
            select(Vinyl)
            .where(Vinyl.seller_id == seller_id)
            .order_by(Vinyl.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def ids_where(
        self, *, genre_id: uuid.UUID | None = None, seller_id: uuid.UUID | None = None
    ) -> list[uuid.UUID]:
        """Ids of listings in a genre or by a seller, without loading the rows."""
        stmt = select(Vinyl.id)
        if genre_id is not None:
            stmt = stmt.where(Vinyl.genre_id == genre_id)
        if seller_id is not None:
            stmt = stmt.where(Vinyl.seller_id == seller_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
