"""Room inventory helpers."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.core.errors import DuplicateRecordError, NotFoundError, StorageError
from boardinghouse.models import Room, RoomStatus


async def get_room(session: AsyncSession, *, room_id: str) -> Room:
    room = await session.get(Room, room_id)
    if room is None:
        raise NotFoundError("Room", room_id)
    return room


async def list_rooms(
    session: AsyncSession,
    *,
    status: RoomStatus | None = None,
    floor: str | None = None,
) -> Sequence[Room]:
    """Return rooms ordered by id, optionally filtered by status or floor."""
    stmt = select(Room).order_by(Room.room_id)
    if status is not None:
        stmt = stmt.where(Room.status == status)
    if floor is not None:
        stmt = stmt.where(Room.floor == floor)
    result = await session.execute(stmt)
    return result.scalars().all()


async def create_room(
    session: AsyncSession,
    *,
    room_id: str,
    floor: str,
    rent_amount: Decimal,
    under_maintenance: bool = False,
) -> Room:
    """Create a room; new rooms start Available unless flagged for maintenance."""
    if rent_amount < Decimal("0"):
        raise ValueError("Rent amount cannot be negative")
    room = Room(
        room_id=room_id,
        floor=floor,
        rent_amount=rent_amount,
        status=RoomStatus.MAINTENANCE if under_maintenance else RoomStatus.AVAILABLE,
    )
    session.add(room)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise DuplicateRecordError(f"Room {room_id} already exists") from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError(f"Could not create room {room_id}: {exc}") from exc
    await session.refresh(room)
    return room


async def update_rent(
    session: AsyncSession, *, room_id: str, rent_amount: Decimal
) -> Room:
    if rent_amount < Decimal("0"):
        raise ValueError("Rent amount cannot be negative")
    room = await get_room(session, room_id=room_id)
    room.rent_amount = rent_amount
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError(f"Could not update room {room_id}: {exc}") from exc
    await session.refresh(room)
    return room
