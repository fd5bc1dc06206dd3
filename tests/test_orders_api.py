"""
Order API tests - purchase rules, snapshot pricing, visibility, seller-driven status changes.
"""

import uuid
from decimal import Decimal

import pytest
from httpx import AsyncClient


async def place_order(client: AsyncClient, vinyl_id, headers) -> dict:
    response = await client.post("/api/v1/orders", headers=headers, json={"vinyl_id": str(vinyl_id)})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_order_snapshots_price_and_seller(
    client: AsyncClient, vinyl, test_user, other_user, auth_headers, other_headers
):
    order = await place_order(client, vinyl.id, other_headers)
    assert order["status"] == "pending"
    assert order["buyer_id"] == str(other_user.id)
    assert order["seller_id"] == str(test_user.id)
    assert order["vinyl"]["title"] == "Kind of Blue"
    assert Decimal(order["price"]) == Decimal("40.00")

    # Later price edits do not touch the order
    await client.patch(f"/api/v1/vinyls/{vinyl.id}", headers=auth_headers, json={"price": "99.00"})
    again = (await client.get(f"/api/v1/orders/{order['id']}", headers=other_headers)).json()
    assert Decimal(again["price"]) == Decimal("40.00")


@pytest.mark.asyncio
async def test_cannot_buy_own_vinyl(client: AsyncClient, vinyl, auth_headers):
    response = await client.post("/api/v1/orders", headers=auth_headers, json={"vinyl_id": str(vinyl.id)})
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["kind"] == "bad_request"
    assert error["code"] == "SELF_PURCHASE"


@pytest.mark.asyncio
async def test_order_unknown_vinyl(client: AsyncClient, other_headers):
    response = await client.post("/api/v1/orders", headers=other_headers, json={"vinyl_id": str(uuid.uuid4())})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_multiple_orders_on_one_vinyl_allowed(client: AsyncClient, vinyl, user_factory, headers_for, other_headers):
    third = await user_factory("third@example.com", name="Third")
    first = await place_order(client, vinyl.id, other_headers)
    second = await place_order(client, vinyl.id, headers_for(third))
    assert first["id"] != second["id"]
    assert first["vinyl_id"] == second["vinyl_id"]


@pytest.mark.asyncio
async def test_list_orders_roles_and_status(
    client: AsyncClient, test_user, other_user, vinyl, vinyl_factory, auth_headers, other_headers
):
    bought = await place_order(client, vinyl.id, other_headers)
    theirs = await vinyl_factory(other_user, title="Thriller")
    sold = await place_order(client, theirs.id, auth_headers)

    async def ids(**params) -> list[str]:
        body = (await client.get("/api/v1/orders", headers=auth_headers, params=params)).json()
        return [o["id"] for o in body]

    assert set(await ids()) == {bought["id"], sold["id"]}
    assert await ids(asBuyer=True) == [sold["id"]]
    assert await ids(asSeller=True) == [bought["id"]]
    assert set(await ids(asBuyer=True, asSeller=True)) == {bought["id"], sold["id"]}
    assert await ids(status="paid") == []


@pytest.mark.asyncio
async def test_order_hidden_from_outsiders(client: AsyncClient, vinyl, user_factory, headers_for, other_headers):
    order = await place_order(client, vinyl.id, other_headers)
    outsider = await user_factory("outsider@example.com")
    response = await client.get(f"/api/v1/orders/{order['id']}", headers=headers_for(outsider))
    assert response.status_code == 403
    assert (await client.get(f"/api/v1/orders/{uuid.uuid4()}", headers=other_headers)).status_code == 404


@pytest.mark.asyncio
async def test_seller_walks_order_to_completed(client: AsyncClient, vinyl, auth_headers, other_headers):
    order = await place_order(client, vinyl.id, other_headers)
    for status in ("paid", "shipped", "completed"):
        r = await client.patch(
            f"/api/v1/orders/{order['id']}/status", headers=auth_headers, json={"status": status}
        )
        assert r.status_code == 200, r.text
        assert r.json()["status"] == status

    r = await client.patch(
        f"/api/v1/orders/{order['id']}/status", headers=auth_headers, json={"status": "cancelled"}
    )
    assert r.status_code == 400
    assert r.json()["error"]["details"] == {"current": "completed", "requested": "cancelled"}


@pytest.mark.asyncio
async def test_buyer_cannot_change_status(client: AsyncClient, vinyl, other_headers):
    order = await place_order(client, vinyl.id, other_headers)
    r = await client.patch(
        f"/api/v1/orders/{order['id']}/status", headers=other_headers, json={"status": "paid"}
    )
    assert r.status_code == 403
    assert r.json()["error"]["code"] == "NOT_ORDER_SELLER"


@pytest.mark.asyncio
async def test_skipping_a_step_is_rejected(client: AsyncClient, vinyl, auth_headers, other_headers):
    order = await place_order(client, vinyl.id, other_headers)
    r = await client.patch(
        f"/api/v1/orders/{order['id']}/status", headers=auth_headers, json={"status": "shipped"}
    )
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_STATUS_TRANSITION"


@pytest.mark.asyncio
async def test_unknown_status_value_is_bad_request(client: AsyncClient, vinyl, auth_headers, other_headers):
    order = await place_order(client, vinyl.id, other_headers)
    r = await client.patch(
        f"/api/v1/orders/{order['id']}/status", headers=auth_headers, json={"status": "refunded"}
    )
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_order_survives_listing_removal(client: AsyncClient, vinyl, auth_headers, other_headers):
    order = await place_order(client, vinyl.id, other_headers)
    await client.delete(f"/api/v1/vinyls/{vinyl.id}", headers=auth_headers)

    kept = (await client.get(f"/api/v1/orders/{order['id']}", headers=other_headers)).json()
    assert kept["vinyl_id"] == str(vinyl.id)
    assert kept["vinyl"] is None


@pytest.mark.asyncio
async def test_register_list_buy_and_advance_scenario(client: AsyncClient):
    async def register(email: str) -> dict:
        r = await client.post(
            "/api/v1/auth/register",
            json={"name": email.split("@")[0], "email": email, "password": "password123"},
        )
        assert r.status_code == 201
        login = await client.post("/api/v1/auth/login", json={"email": email, "password": "password123"})
        body = login.json()
        return {"id": body["user"]["id"], "headers": {"Authorization": f"Bearer {body['access_token']}"}}

    a = await register("a@x.com")
    v = await client.post(
        "/api/v1/vinyls",
        headers=a["headers"],
        json={"title": "Blue Train", "artist": "John Coltrane", "condition": "Excellent", "price": "50.00"},
    )
    assert v.status_code == 201
    b = await register("b@x.com")

    order = await place_order(client, v.json()["id"], b["headers"])
    assert order["status"] == "pending"
    assert Decimal(order["price"]) == Decimal("50.00")
    assert order["seller_id"] == a["id"]
    assert order["buyer_id"] == b["id"]

    url = f"/api/v1/orders/{order['id']}/status"
    assert (await client.patch(url, headers=a["headers"], json={"status": "paid"})).status_code == 200
    assert (await client.patch(url, headers=b["headers"], json={"status": "shipped"})).status_code == 403
    assert (await client.patch(url, headers=a["headers"], json={"status": "completed"})).status_code == 400
