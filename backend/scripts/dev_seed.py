"""Seed a development database with staff, rooms and one funded boarder."""

from __future__ import annotations

import asyncio
from decimal import Decimal

from sqlalchemy import select

from boardinghouse.db.session import get_sessionmaker
from boardinghouse.models import Owner
from boardinghouse.services import (
    boarder_service,
    ledger_service,
    room_service,
    staff_service,
)

OWNER_ID = "O001"
ROOMS = (
    ("R101", "1", Decimal("3500.00"), False),
    ("R102", "1", Decimal("3500.00"), False),
    ("R201", "2", Decimal("4200.00"), False),
    ("R202", "2", Decimal("4200.00"), True),
)


async def seed() -> None:
    sessionmaker = get_sessionmaker()
    async with sessionmaker() as session:
        existing = await session.scalar(select(Owner).where(Owner.owner_id == OWNER_ID))
        if existing is not None:
            print(f"Owner {OWNER_ID} already exists; nothing to seed.")
            return

        await staff_service.create_owner(
            session, owner_id=OWNER_ID, first_name="Dev", last_name="Owner"
        )
        await staff_service.create_caretaker(
            session,
            caretaker_id="C001",
            owner_id=OWNER_ID,
            first_name="Dev",
            last_name="Caretaker",
        )
        await staff_service.create_employee(
            session,
            employee_id="E001",
            caretaker_id="C001",
            first_name="Dev",
            last_name="Staff",
            position="front desk",
        )
        for room_id, floor, rent, under_maintenance in ROOMS:
            await room_service.create_room(
                session,
                room_id=room_id,
                floor=floor,
                rent_amount=rent,
                under_maintenance=under_maintenance,
            )

        await boarder_service.create_boarder(
            session,
            boarder_id="B001",
            first_name="Sample",
            last_name="Boarder",
            email="boarder@example.com",
            contact_number="09170000000",
            room_id="R101",
            caretaker_id="C001",
        )
        await ledger_service.record_payment(
            session,
            boarder_id="B001",
            amount=Decimal("7000.00"),
            payment_method="cash",
            payment_type="deposit",
        )
        await ledger_service.record_charge(
            session,
            boarder_id="B001",
            description="First month rent",
            charge_type="rent",
            amount=Decimal("3500.00"),
        )
        print("Seeded owner, caretaker, employee, 4 rooms and boarder B001.")


if __name__ == "__main__":
    asyncio.run(seed())
