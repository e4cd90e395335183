"""Booking intake and status transitions."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.core.errors import NotFoundError, StorageError
from boardinghouse.models import Booking, BookingStatus, Room

_ALLOWED_TRANSITIONS: Mapping[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset(
        {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
    ),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.CANCELLED: frozenset(),
}


async def _commit(session: AsyncSession, booking: Booking) -> Booking:
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError(f"Could not save booking: {exc}") from exc
    await session.refresh(booking)
    return booking


async def create_booking(
    session: AsyncSession,
    *,
    room_id: str,
    first_name: str,
    last_name: str,
    contact_number: str | None = None,
    booking_date: date | None = None,
    move_in_date: date | None = None,
    caretaker_id: str | None = None,
    employee_id: str | None = None,
) -> Booking:
    """Record a pending booking; room status is not affected."""
    if await session.get(Room, room_id) is None:
        raise NotFoundError("Room", room_id)
    booking = Booking(
        room_id=room_id,
        first_name=first_name,
        last_name=last_name,
        contact_number=contact_number,
        booking_date=booking_date or date.today(),
        move_in_date=move_in_date,
        caretaker_id=caretaker_id,
        employee_id=employee_id,
        status=BookingStatus.PENDING,
    )
    session.add(booking)
    return await _commit(session, booking)


async def get_booking(session: AsyncSession, *, booking_id: uuid.UUID) -> Booking:
    booking = await session.get(Booking, booking_id)
    if booking is None:
        raise NotFoundError("Booking", booking_id)
    return booking


async def list_bookings(
    session: AsyncSession,
    *,
    status: BookingStatus | None = None,
    room_id: str | None = None,
) -> Sequence[Booking]:
    stmt = select(Booking).order_by(Booking.booking_date.desc(), Booking.created_at)
    if status is not None:
        stmt = stmt.where(Booking.status == status)
    if room_id is not None:
        stmt = stmt.where(Booking.room_id == room_id)
    result = await session.execute(stmt)
    return result.scalars().all()


async def update_status(
    session: AsyncSession, *, booking_id: uuid.UUID, status: BookingStatus
) -> Booking:
    """Move a booking to ``status`` if the transition is allowed."""
    booking = await get_booking(session, booking_id=booking_id)
    if status == booking.status:
        return booking
    if status not in _ALLOWED_TRANSITIONS[booking.status]:
        raise ValueError(
            f"Cannot move booking from {booking.status.value} to {status.value}"
        )
    booking.status = status
    return await _commit(session, booking)
