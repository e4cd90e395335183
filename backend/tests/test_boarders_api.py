"""API tests for boarder lifecycle endpoints."""

from __future__ import annotations

from typing import Any

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _create_boarder(
    client: AsyncClient, boarder_id: str = "B001", **overrides: Any
) -> dict[str, Any]:
    payload = {
        "boarder_id": boarder_id,
        "first_name": "Bea",
        "last_name": "Cruz",
        "email": f"{boarder_id.lower()}@example.com",
        "contact_number": "09171234567",
        "room_id": "R101",
        "caretaker_id": "C001",
    }
    payload.update(overrides)
    response = await client.post("/api/v1/boarders", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def _room_status(client: AsyncClient, room_id: str) -> str:
    response = await client.get(f"/api/v1/rooms/{room_id}")
    assert response.status_code == 200
    return response.json()["status"]


async def test_boarder_move_in_and_lookup(client: AsyncClient) -> None:
    created = await _create_boarder(client)

    assert created["room"]["room_id"] == "R101"
    assert created["room"]["status"] == "occupied"
    assert await _room_status(client, "R101") == "occupied"

    fetched = await client.get("/api/v1/boarders/B001")
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "b001@example.com"

    listing = await client.get("/api/v1/boarders", params={"room_id": "R101"})
    assert [b["boarder_id"] for b in listing.json()] == ["B001"]


async def test_unknown_room_and_duplicate_email(client: AsyncClient) -> None:
    missing_room = await client.post(
        "/api/v1/boarders",
        json={
            "boarder_id": "B009",
            "first_name": "Lost",
            "last_name": "Soul",
            "email": "lost@example.com",
            "room_id": "R999",
        },
    )
    assert missing_room.status_code == 404

    await _create_boarder(client)
    duplicate = await client.post(
        "/api/v1/boarders",
        json={
            "boarder_id": "B002",
            "first_name": "Dan",
            "last_name": "Lee",
            "email": "b001@example.com",
        },
    )
    assert duplicate.status_code == 409


async def test_move_between_rooms_and_out(client: AsyncClient) -> None:
    await _create_boarder(client)

    moved = await client.put("/api/v1/boarders/B001/room", json={"room_id": "R102"})
    assert moved.status_code == 200
    assert moved.json()["room_id"] == "R102"
    assert await _room_status(client, "R101") == "available"
    assert await _room_status(client, "R102") == "occupied"

    out = await client.put("/api/v1/boarders/B001/room", json={"room_id": None})
    assert out.status_code == 200
    assert out.json()["room"] is None
    assert await _room_status(client, "R102") == "available"


async def test_update_boarder_contact(client: AsyncClient) -> None:
    await _create_boarder(client)

    response = await client.patch(
        "/api/v1/boarders/B001", json={"contact_number": "09175550000"}
    )

    assert response.status_code == 200
    assert response.json()["contact_number"] == "09175550000"
    assert response.json()["room_id"] == "R101"


async def test_guardians(client: AsyncClient) -> None:
    await _create_boarder(client)

    created = await client.post(
        "/api/v1/boarders/B001/guardians",
        json={
            "first_name": "Rosa",
            "last_name": "Cruz",
            "relationship_to_boarder": "mother",
        },
    )
    assert created.status_code == 201

    listing = await client.get("/api/v1/boarders/B001/guardians")
    assert [g["first_name"] for g in listing.json()] == ["Rosa"]

    missing = await client.get("/api/v1/boarders/B404/guardians")
    assert missing.status_code == 404


async def test_delete_boarder_cascades(client: AsyncClient) -> None:
    await _create_boarder(client)
    await client.post(
        "/api/v1/boarders/B001/guardians",
        json={"first_name": "Rosa", "last_name": "Cruz"},
    )
    await client.post(
        "/api/v1/boarders/B001/payments",
        json={"amount": "1000.00", "payment_method": "cash", "payment_type": "deposit"},
    )
    await client.post(
        "/api/v1/bookings",
        json={
            "room_id": "R101",
            "first_name": "Bea",
            "last_name": "Cruz",
            "contact_number": "09171234567",
        },
    )

    response = await client.delete("/api/v1/boarders/B001")

    assert response.status_code == 200
    assert response.json() == {
        "boarder_id": "B001",
        "room_id": "R101",
        "guardians": 1,
        "payments": 1,
        "charges": 0,
        "deposit_balances": 1,
        "bookings": 1,
    }
    assert (await client.get("/api/v1/boarders/B001")).status_code == 404
    assert (await client.get("/api/v1/boarders/B001/balance")).status_code == 404
    assert await _room_status(client, "R101") == "available"

    again = await client.delete("/api/v1/boarders/B001")
    assert again.status_code == 404


async def test_boarder_room_view(client: AsyncClient) -> None:
    await _create_boarder(client)
    await _create_boarder(client, "B002", room_id=None, contact_number=None)

    response = await client.get("/api/v1/boarders/rooms")

    assert response.status_code == 200
    rows = {row["boarder_id"]: row for row in response.json()}
    assert rows["B001"]["room_status"] == "occupied"
    assert rows["B002"]["room_id"] is None
