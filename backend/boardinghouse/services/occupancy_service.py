"""Room status derivation from boarder room assignments.

The ``on_*`` hooks do not commit; they are awaited by the boarder service
inside the same transaction as the boarder write that triggered them.
Maintenance is never overwritten by automatic derivation.
"""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.core.errors import NotFoundError, StorageError
from boardinghouse.models import Boarder, Room, RoomStatus

logger = logging.getLogger(__name__)


async def _load_room(session: AsyncSession, room_id: str) -> Room:
    result = await session.execute(
        select(Room).where(Room.room_id == room_id).with_for_update()
    )
    room = result.scalar_one_or_none()
    if room is None:
        raise NotFoundError("Room", room_id)
    return room


async def _has_occupants(session: AsyncSession, room_id: str) -> bool:
    count = await session.scalar(
        select(func.count()).select_from(Boarder).where(Boarder.room_id == room_id)
    )
    return bool(count)


async def _occupy(session: AsyncSession, room_id: str) -> None:
    room = await _load_room(session, room_id)
    if room.status == RoomStatus.MAINTENANCE:
        logger.info("Room %s is under maintenance; status left unchanged", room_id)
        return
    room.status = RoomStatus.OCCUPIED


async def _release(session: AsyncSession, room_id: str) -> None:
    room = await _load_room(session, room_id)
    if room.status == RoomStatus.MAINTENANCE:
        return
    if await _has_occupants(session, room_id):
        return
    room.status = RoomStatus.AVAILABLE


async def on_boarder_created(session: AsyncSession, *, room_id: str | None) -> None:
    if room_id is not None:
        await _occupy(session, room_id)
    await session.flush()


async def on_room_assignment_changed(
    session: AsyncSession,
    *,
    old_room_id: str | None,
    new_room_id: str | None,
) -> None:
    """React to a boarder moving in, moving rooms or moving out.

    The boarder row must already carry ``new_room_id`` (flushed) so the old
    room's remaining occupants are counted correctly.
    """
    if old_room_id == new_room_id:
        return
    # Lock rooms in id order so concurrent swaps cannot deadlock.
    for room_id in sorted(r for r in (old_room_id, new_room_id) if r is not None):
        await _load_room(session, room_id)
    if new_room_id is not None:
        await _occupy(session, new_room_id)
    if old_room_id is not None:
        await _release(session, old_room_id)
    await session.flush()


async def on_boarder_deleted(session: AsyncSession, *, room_id: str | None) -> None:
    if room_id is not None:
        await _release(session, room_id)
    await session.flush()


async def derive_status(session: AsyncSession, *, room_id: str) -> RoomStatus:
    """Return the status a room should have, ignoring any maintenance flag."""
    if await _has_occupants(session, room_id):
        return RoomStatus.OCCUPIED
    return RoomStatus.AVAILABLE


async def mark_maintenance(session: AsyncSession, *, room_id: str) -> Room:
    """Place a room under maintenance, suspending automatic derivation."""
    try:
        room = await _load_room(session, room_id)
        room.status = RoomStatus.MAINTENANCE
        await session.commit()
    except NotFoundError:
        await session.rollback()
        raise
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError(f"Could not update room {room_id}: {exc}") from exc
    await session.refresh(room)
    logger.info("Room %s marked for maintenance", room_id)
    return room


async def clear_maintenance(session: AsyncSession, *, room_id: str) -> Room:
    """Lift maintenance and restore the status implied by current occupants."""
    try:
        room = await _load_room(session, room_id)
        if room.status == RoomStatus.MAINTENANCE:
            room.status = await derive_status(session, room_id=room_id)
        await session.commit()
    except NotFoundError:
        await session.rollback()
        raise
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError(f"Could not update room {room_id}: {exc}") from exc
    await session.refresh(room)
    logger.info("Room %s maintenance cleared; status %s", room_id, room.status.value)
    return room
