"""
Genre API tests - admin CRUD, case-insensitive uniqueness and search.
"""

import uuid

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_genres_sorted_and_searchable(client: AsyncClient, admin_headers):
    for name in ("Rock", "Jazz", "Blues", "Jazz Fusion"):
        r = await client.post("/api/v1/genres", headers=admin_headers, json={"name": name})
        assert r.status_code == 201

    names = [g["name"] for g in (await client.get("/api/v1/genres")).json()]
    assert names == ["Blues", "Jazz", "Jazz Fusion", "Rock"]

    found = [g["name"] for g in (await client.get("/api/v1/genres", params={"search": "jAzZ"})).json()]
    assert found == ["Jazz", "Jazz Fusion"]


@pytest.mark.asyncio
async def test_create_genre_requires_admin(client: AsyncClient, auth_headers):
    response = await client.post("/api/v1/genres", headers=auth_headers, json={"name": "Rock"})
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_genre_name_conflict_is_case_insensitive(client: AsyncClient, genre, admin_headers):
    response = await client.post("/api/v1/genres", headers=admin_headers, json={"name": "JAZZ"})
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "GENRE_NAME_TAKEN"


@pytest.mark.asyncio
async def test_rename_genre_to_own_name_allowed(client: AsyncClient, genre, admin_headers):
    response = await client.patch(
        f"/api/v1/genres/{genre.id}",
        headers=admin_headers,
        json={"name": "Jazz", "description": "Updated"},
    )
    assert response.status_code == 200
    assert response.json()["description"] == "Updated"


@pytest.mark.asyncio
async def test_rename_genre_to_other_genres_name_conflicts(client: AsyncClient, genre, admin_headers):
    rock = (await client.post("/api/v1/genres", headers=admin_headers, json={"name": "Rock"})).json()
    response = await client.patch(
        f"/api/v1/genres/{rock['id']}", headers=admin_headers, json={"name": "jazz"}
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_get_update_delete_missing_genre(client: AsyncClient, admin_headers):
    missing = uuid.uuid4()
    assert (await client.get(f"/api/v1/genres/{missing}")).status_code == 404
    assert (
        await client.patch(f"/api/v1/genres/{missing}", headers=admin_headers, json={"name": "X"})
    ).status_code == 404
    assert (await client.delete(f"/api/v1/genres/{missing}", headers=admin_headers)).status_code == 404


@pytest.mark.asyncio
async def test_delete_genre_clears_vinyl_genre(client: AsyncClient, genre, vinyl, admin_headers):
    response = await client.delete(f"/api/v1/genres/{genre.id}", headers=admin_headers)
    assert response.status_code == 204

    detail = (await client.get(f"/api/v1/vinyls/{vinyl.id}")).json()
    assert detail["genre_id"] is None
    assert detail["genre"] is None
