"""Read-only projections: boarder/room listing and balance statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from boardinghouse.core.errors import NotFoundError
from boardinghouse.models import Boarder, Charge, Payment, Room, RoomStatus


@dataclass(slots=True)
class BoarderRoomRow:
    boarder_id: str
    first_name: str
    last_name: str
    contact_number: str | None
    email: str
    room_id: str | None
    floor: str | None
    rent_amount: Decimal | None
    room_status: RoomStatus | None


@dataclass(slots=True)
class StatementLine:
    entry_date: date
    kind: str
    description: str
    amount: Decimal


@dataclass(slots=True)
class BalanceStatement:
    """Balance of one boarder with the ledger entries that produced it."""

    boarder_id: str
    first_name: str
    last_name: str
    room_id: str | None
    balance: Decimal
    total_payments: Decimal
    total_charges: Decimal
    payments: Sequence[Payment] = field(default_factory=list)
    charges: Sequence[Charge] = field(default_factory=list)
    lines: list[StatementLine] = field(default_factory=list)


async def boarder_room_view(
    session: AsyncSession, *, room_status: RoomStatus | None = None
) -> list[BoarderRoomRow]:
    """Return every boarder joined with their room, if any."""
    stmt = (
        select(Boarder, Room)
        .outerjoin(Room, Boarder.room_id == Room.room_id)
        .order_by(Boarder.boarder_id)
    )
    if room_status is not None:
        stmt = stmt.where(Room.status == room_status)
    result = await session.execute(stmt)
    return [
        BoarderRoomRow(
            boarder_id=boarder.boarder_id,
            first_name=boarder.first_name,
            last_name=boarder.last_name,
            contact_number=boarder.contact_number,
            email=boarder.email,
            room_id=room.room_id if room else None,
            floor=room.floor if room else None,
            rent_amount=room.rent_amount if room else None,
            room_status=room.status if room else None,
        )
        for boarder, room in result.all()
    ]


async def balance_statement(
    session: AsyncSession, *, boarder_id: str
) -> BalanceStatement:
    """Join a boarder's deposit balance with their payments and charges."""
    result = await session.execute(
        select(Boarder)
        .where(Boarder.boarder_id == boarder_id)
        .options(
            selectinload(Boarder.deposit_balance),
            selectinload(Boarder.payments),
            selectinload(Boarder.charges),
        )
        .execution_options(populate_existing=True)
    )
    boarder = result.scalar_one_or_none()
    if boarder is None:
        raise NotFoundError("Boarder", boarder_id)

    payments = list(boarder.payments)
    charges = list(boarder.charges)
    total_payments = sum((p.amount for p in payments), Decimal("0.00"))
    total_charges = sum((c.amount for c in charges), Decimal("0.00"))
    ledger = boarder.deposit_balance
    balance = ledger.balance if ledger is not None else Decimal("0.00")

    lines = [
        StatementLine(
            entry_date=p.payment_date,
            kind="payment",
            description=f"{p.payment_type} ({p.payment_method})",
            amount=p.amount,
        )
        for p in payments
    ] + [
        StatementLine(
            entry_date=c.charge_date,
            kind="charge",
            description=c.description,
            amount=-c.amount,
        )
        for c in charges
    ]
    lines.sort(key=lambda line: (line.entry_date, line.kind != "payment"))

    return BalanceStatement(
        boarder_id=boarder.boarder_id,
        first_name=boarder.first_name,
        last_name=boarder.last_name,
        room_id=boarder.room_id,
        balance=Decimal(balance).quantize(Decimal("0.01")),
        total_payments=total_payments.quantize(Decimal("0.01")),
        total_charges=total_charges.quantize(Decimal("0.01")),
        payments=payments,
        charges=charges,
        lines=lines,
    )
