"""API tests for bookings."""

from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_booking_lifecycle(client: AsyncClient) -> None:
    created = await client.post(
        "/api/v1/bookings",
        json={
            "room_id": "R102",
            "first_name": "Ivy",
            "last_name": "Tan",
            "move_in_date": "2025-07-01",
            "caretaker_id": "C001",
        },
    )
    assert created.status_code == 201
    booking = created.json()
    assert booking["status"] == "pending"

    confirmed = await client.patch(
        f"/api/v1/bookings/{booking['id']}/status", json={"status": "confirmed"}
    )
    assert confirmed.status_code == 200
    assert confirmed.json()["status"] == "confirmed"

    backwards = await client.patch(
        f"/api/v1/bookings/{booking['id']}/status", json={"status": "pending"}
    )
    assert backwards.status_code == 400

    listing = await client.get("/api/v1/bookings", params={"status": "confirmed"})
    assert [b["id"] for b in listing.json()] == [booking["id"]]

    room = await client.get("/api/v1/rooms/R102")
    assert room.json()["status"] == "available"


async def test_booking_errors(client: AsyncClient) -> None:
    missing_room = await client.post(
        "/api/v1/bookings",
        json={"room_id": "R999", "first_name": "Ivy", "last_name": "Tan"},
    )
    assert missing_room.status_code == 404

    missing_booking = await client.patch(
        f"/api/v1/bookings/{uuid.uuid4()}/status", json={"status": "cancelled"}
    )
    assert missing_booking.status_code == 404
