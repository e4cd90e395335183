"""API tests for income reports."""

from __future__ import annotations

from decimal import Decimal

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_income_report(client: AsyncClient) -> None:
    await client.post(
        "/api/v1/boarders",
        json={
            "boarder_id": "B001",
            "first_name": "Bea",
            "last_name": "Cruz",
            "email": "bea@example.com",
            "room_id": "R101",
        },
    )
    await client.post(
        "/api/v1/boarders/B001/payments",
        json={
            "amount": "3500.00",
            "payment_method": "cash",
            "payment_type": "rent",
            "payment_date": "2025-06-01",
        },
    )
    await client.post(
        "/api/v1/boarders/B001/charges",
        json={
            "description": "Laundry",
            "charge_type": "service",
            "amount": "300.00",
            "charge_date": "2025-06-30",
        },
    )

    response = await client.get(
        "/api/v1/reports/income",
        params={"start_date": "2025-06-01", "end_date": "2025-06-30"},
    )

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["total_payments"]) == Decimal("3500")
    assert Decimal(body["total_charges"]) == Decimal("300")
    assert Decimal(body["net_income"]) == Decimal("3200")


async def test_empty_income_report(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/reports/income",
        params={"start_date": "2024-01-01", "end_date": "2024-01-31"},
    )

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["total_payments"]) == 0
    assert Decimal(body["total_charges"]) == 0
    assert Decimal(body["net_income"]) == 0


async def test_inverted_range_is_bad_request(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/reports/income",
        params={"start_date": "2025-02-01", "end_date": "2025-01-01"},
    )
    assert response.status_code == 400

    missing = await client.get("/api/v1/reports/income")
    assert missing.status_code == 422
