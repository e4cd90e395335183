"""API tests for the owner/caretaker/employee hierarchy."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_staff_hierarchy(client: AsyncClient) -> None:
    owners = await client.get("/api/v1/owners")
    assert [o["owner_id"] for o in owners.json()] == ["O001"]

    caretaker = await client.post(
        "/api/v1/caretakers",
        json={
            "caretaker_id": "C002",
            "owner_id": "O001",
            "first_name": "Nina",
            "last_name": "Go",
        },
    )
    assert caretaker.status_code == 201

    employee = await client.post(
        "/api/v1/employees",
        json={
            "employee_id": "E001",
            "caretaker_id": "C002",
            "first_name": "Paolo",
            "last_name": "Sy",
            "position": "cleaner",
        },
    )
    assert employee.status_code == 201

    by_owner = await client.get("/api/v1/caretakers", params={"owner_id": "O001"})
    assert [c["caretaker_id"] for c in by_owner.json()] == ["C001", "C002"]

    by_caretaker = await client.get("/api/v1/employees", params={"caretaker_id": "C002"})
    assert [e["employee_id"] for e in by_caretaker.json()] == ["E001"]


async def test_staff_references_must_exist(client: AsyncClient) -> None:
    orphan = await client.post(
        "/api/v1/caretakers",
        json={
            "caretaker_id": "C009",
            "owner_id": "O999",
            "first_name": "Nina",
            "last_name": "Go",
        },
    )
    assert orphan.status_code == 404

    duplicate = await client.post(
        "/api/v1/owners",
        json={"owner_id": "O001", "first_name": "Olivia", "last_name": "Reyes"},
    )
    assert duplicate.status_code == 409
