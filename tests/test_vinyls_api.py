"""
Vinyl API tests - catalog browsing, listing CRUD, ownership, validation.
"""

import uuid
from decimal import Decimal

import pytest
from httpx import AsyncClient

from vinylplatz.db.models import VinylCondition

VALID_VINYL = {
    "title": "A Love Supreme",
    "artist": "John Coltrane",
    "release_year": 1965,
    "condition": "Very Good",
    "price": "60.00",
}


@pytest.mark.asyncio
async def test_create_vinyl_sets_seller_from_token(client: AsyncClient, test_user, genre, auth_headers):
    response = await client.post(
        "/api/v1/vinyls", headers=auth_headers, json={**VALID_VINYL, "genre_id": str(genre.id)}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["seller_id"] == str(test_user.id)
    assert data["seller"] == {"id": str(test_user.id), "name": test_user.name}
    assert data["genre"]["name"] == "Jazz"
    assert Decimal(data["price"]) == Decimal("60.00")
    assert data["created_at"]


@pytest.mark.asyncio
async def test_create_vinyl_requires_auth(client: AsyncClient):
    response = await client.post("/api/v1/vinyls", json=VALID_VINYL)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_vinyl_negative_price_rejected(client: AsyncClient, auth_headers):
    response = await client.post("/api/v1/vinyls", headers=auth_headers, json={**VALID_VINYL, "price": "-1"})
    assert response.status_code == 400
    assert response.json()["error"]["kind"] == "bad_request"


@pytest.mark.asyncio
async def test_create_vinyl_release_year_out_of_range(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/vinyls", headers=auth_headers, json={**VALID_VINYL, "release_year": 1725}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_vinyl_unknown_genre(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/vinyls", headers=auth_headers, json={**VALID_VINYL, "genre_id": str(uuid.uuid4())}
    )
    assert response.status_code == 404
    assert response.json()["error"]["details"]["resource"] == "Genre"


@pytest.mark.asyncio
async def test_get_vinyl_detail_and_missing(client: AsyncClient, vinyl):
    response = await client.get(f"/api/v1/vinyls/{vinyl.id}")
    assert response.status_code == 200
    assert response.json()["title"] == "Kind of Blue"

    missing = await client.get(f"/api/v1/vinyls/{uuid.uuid4()}")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_pagination(client: AsyncClient, test_user, vinyl_factory):
    for i in range(25):
        await vinyl_factory(test_user, title=f"Record {i:02d}")

    first = (await client.get("/api/v1/vinyls")).json()
    assert first["total"] == 25
    assert first["limit"] == 12
    assert first["total_pages"] == 3
    assert len(first["items"]) == 12

    second = (await client.get("/api/v1/vinyls", params={"page": 2})).json()
    assert len(second["items"]) == 12
    third = (await client.get("/api/v1/vinyls", params={"page": 3})).json()
    assert len(third["items"]) == 1

    ids = {v["id"] for page in (first, second, third) for v in page["items"]}
    assert len(ids) == 25


@pytest.mark.asyncio
async def test_limit_above_maximum_rejected(client: AsyncClient):
    response = await client.get("/api/v1/vinyls", params={"limit": 101})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_filters(client: AsyncClient, test_user, other_user, genre, vinyl_factory):
    await vinyl_factory(test_user, title="Blue Train", artist="John Coltrane", price=Decimal("30"), genre_id=genre.id)
    await vinyl_factory(test_user, title="Giant Steps", artist="John Coltrane", price=Decimal("55"), release_year=1960)
    await vinyl_factory(other_user, title="Thriller", artist="Michael Jackson", price=Decimal("50"), release_year=1982)

    async def titles(**params) -> set[str]:
        body = (await client.get("/api/v1/vinyls", params=params)).json()
        return {v["title"] for v in body["items"]}

    assert await titles(artist="coltrane") == {"Blue Train", "Giant Steps"}
    assert await titles(title="THRILL") == {"Thriller"}
    assert await titles(genreId=str(genre.id)) == {"Blue Train"}
    assert await titles(sellerId=str(other_user.id)) == {"Thriller"}
    assert await titles(minPrice="30", maxPrice="50") == {"Blue Train", "Thriller"}
    assert await titles(minReleaseYear=1960, maxReleaseYear=1990) == {"Giant Steps", "Thriller"}
    # Exact year wins over the range
    assert await titles(releaseYear=1959, minReleaseYear=1960) == {"Blue Train"}


@pytest.mark.asyncio
async def test_sort_by_price_and_fallbacks(client: AsyncClient, test_user, vinyl_factory):
    await vinyl_factory(test_user, title="Cheap", price=Decimal("10"))
    await vinyl_factory(test_user, title="Mid", price=Decimal("20"))
    await vinyl_factory(test_user, title="Dear", price=Decimal("30"))

    async def order(**params) -> list[str]:
        body = (await client.get("/api/v1/vinyls", params=params)).json()
        return [v["title"] for v in body["items"]]

    assert await order(sortBy="price", sortOrder="ASC") == ["Cheap", "Mid", "Dear"]
    assert await order(sortBy="price", sortOrder="sideways") == ["Dear", "Mid", "Cheap"]
    # Unknown column falls back to newest first
    assert await order(sortBy="password") == ["Dear", "Mid", "Cheap"]
    assert await order(sortBy="createdAt", sortOrder="asc") == ["Cheap", "Mid", "Dear"]


@pytest.mark.asyncio
async def test_sort_by_condition_uses_grading_order(client: AsyncClient, test_user, vinyl_factory):
    await vinyl_factory(test_user, title="Poor", condition=VinylCondition.POOR)
    await vinyl_factory(test_user, title="Mint", condition=VinylCondition.MINT)
    await vinyl_factory(test_user, title="Excellent", condition=VinylCondition.EXCELLENT)

    body = (await client.get("/api/v1/vinyls", params={"sortBy": "condition", "sortOrder": "asc"})).json()
    assert [v["title"] for v in body["items"]] == ["Mint", "Excellent", "Poor"]


@pytest.mark.asyncio
async def test_query_string_uses_camel_case_names(client: AsyncClient, test_user, vinyl_factory):
    await vinyl_factory(test_user, title="Cheap", price=Decimal("10"))
    await vinyl_factory(test_user, title="Dear", price=Decimal("90"))
    await vinyl_factory(test_user, title="Mid", price=Decimal("50"))

    body = (await client.get("/api/v1/vinyls?minPrice=50&sortBy=price&sortOrder=asc")).json()
    assert [v["title"] for v in body["items"]] == ["Mid", "Dear"]
    assert body["total_pages"] == 1


@pytest.mark.asyncio
async def test_listing_seller_has_no_contact_details(client: AsyncClient, vinyl):
    body = (await client.get("/api/v1/vinyls")).json()
    seller = body["items"][0]["seller"]
    assert set(seller) == {"id", "name"}


@pytest.mark.asyncio
async def test_update_vinyl_by_owner(client: AsyncClient, vinyl, auth_headers):
    response = await client.patch(
        f"/api/v1/vinyls/{vinyl.id}",
        headers=auth_headers,
        json={"price": "45.50", "genre_id": None},
    )
    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["price"]) == Decimal("45.50")
    assert data["genre_id"] is None
    assert data["title"] == "Kind of Blue"


@pytest.mark.asyncio
async def test_update_vinyl_null_title_rejected(client: AsyncClient, vinyl, auth_headers):
    response = await client.patch(f"/api/v1/vinyls/{vinyl.id}", headers=auth_headers, json={"title": None})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_and_delete_by_non_owner_forbidden(client: AsyncClient, vinyl, other_headers):
    patch = await client.patch(f"/api/v1/vinyls/{vinyl.id}", headers=other_headers, json={"price": "1"})
    assert patch.status_code == 403
    assert patch.json()["error"]["code"] == "NOT_LISTING_OWNER"

    delete = await client.delete(f"/api/v1/vinyls/{vinyl.id}", headers=other_headers)
    assert delete.status_code == 403


@pytest.mark.asyncio
async def test_delete_vinyl(client: AsyncClient, vinyl, auth_headers):
    response = await client.delete(f"/api/v1/vinyls/{vinyl.id}", headers=auth_headers)
    assert response.status_code == 204
    assert (await client.get(f"/api/v1/vinyls/{vinyl.id}")).status_code == 404
    again = await client.delete(f"/api/v1/vinyls/{vinyl.id}", headers=auth_headers)
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_my_vinyls(client: AsyncClient, test_user, other_user, vinyl_factory, auth_headers):
    await vinyl_factory(test_user, title="Mine")
    await vinyl_factory(other_user, title="Theirs")
    response = await client.get("/api/v1/vinyls/seller/me", headers=auth_headers)
    assert response.status_code == 200
    assert [v["title"] for v in response.json()] == ["Mine"]
