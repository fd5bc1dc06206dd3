"""
Vinyl detail cache - the cached document embeds the seller and the genre.
Challenge: A genre rename or delete and a seller profile edit change the detail too.
Design: Every writer that touches a listing, its genre or its seller queues the affected
vinyl:{id} keys on the session; they are deleted after the commit.
"""

import uuid

from vinylplatz.cache.redis_client import (
    cache_key,
    invalidate_after_commit,
    load_document,
    store_document,
)
from vinylplatz.db.repositories.vinyl_repository import VinylRepository

NAMESPACE = "vinyl"


def detail_key(vinyl_id: uuid.UUID) -> str:
    return cache_key(NAMESPACE, vinyl_id)


class VinylDetailCache:
    def __init__(self, vinyl_repo: VinylRepository):
        self.vinyl_repo = vinyl_repo

    async def get(self, vinyl_id: uuid.UUID) -> dict | None:
        return await load_document(detail_key(vinyl_id))

    async def put(self, vinyl_id: uuid.UUID, document: dict) -> None:
        await store_document(detail_key(vinyl_id), document)

    def forget(self, *vinyl_ids: uuid.UUID) -> None:
        invalidate_after_commit(self.vinyl_repo.session, (detail_key(v) for v in vinyl_ids))

    async def forget_genre(self, genre_id: uuid.UUID) -> None:
        """Call before the genre row changes; a delete nulls genre_id on its vinyls."""
        self.forget(*await self.vinyl_repo.ids_where(genre_id=genre_id))

    async def forget_seller(self, seller_id: uuid.UUID) -> None:
        self.forget(*await self.vinyl_repo.ids_where(seller_id=seller_id))
