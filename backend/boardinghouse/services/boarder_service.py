"""Boarder lifecycle: move-in, room moves, guardians and cascading removal."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from boardinghouse.core.config import get_settings
from boardinghouse.core.errors import (
    BoardingError,
    DuplicateRecordError,
    NotFoundError,
    StorageError,
)
from boardinghouse.models import (
    Boarder,
    Booking,
    Charge,
    DepositBalance,
    Guardian,
    Payment,
    Room,
)
from boardinghouse.services import boarder_locks, occupancy_service

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "first_name",
    "middle_name",
    "last_name",
    "contact_number",
    "email",
    "caretaker_id",
    "employee_id",
)


@dataclass(slots=True)
class BoarderRemoval:
    """Rows removed by :func:`delete_boarder`, per table."""

    boarder_id: str
    room_id: str | None
    guardians: int
    payments: int
    charges: int
    deposit_balances: int
    bookings: int


def _base_boarder_query() -> Select[tuple[Boarder]]:
    return select(Boarder).options(selectinload(Boarder.room))


async def _require_room(session: AsyncSession, room_id: str) -> None:
    exists = await session.scalar(select(Room.room_id).where(Room.room_id == room_id))
    if exists is None:
        raise NotFoundError("Room", room_id)


async def _rollback_and_wrap(
    session: AsyncSession, exc: SQLAlchemyError, action: str
) -> BoardingError:
    await session.rollback()
    if isinstance(exc, IntegrityError):
        return DuplicateRecordError(f"Could not {action}: conflicting record")
    return StorageError(f"Could not {action}: {exc}")


async def get_boarder(session: AsyncSession, *, boarder_id: str) -> Boarder:
    """Return a boarder with its room loaded."""
    result = await session.execute(
        _base_boarder_query().where(Boarder.boarder_id == boarder_id)
    )
    boarder = result.scalar_one_or_none()
    if boarder is None:
        raise NotFoundError("Boarder", boarder_id)
    return boarder


async def list_boarders(
    session: AsyncSession,
    *,
    room_id: str | None = None,
    skip: int = 0,
    limit: int = 50,
) -> Sequence[Boarder]:
    """Return boarders ordered by id, optionally limited to one room."""
    stmt = _base_boarder_query().order_by(Boarder.boarder_id)
    if room_id is not None:
        stmt = stmt.where(Boarder.room_id == room_id)
    result = await session.execute(stmt.offset(skip).limit(limit))
    return result.scalars().all()


async def create_boarder(
    session: AsyncSession,
    *,
    boarder_id: str,
    first_name: str,
    last_name: str,
    email: str,
    middle_name: str | None = None,
    contact_number: str | None = None,
    room_id: str | None = None,
    caretaker_id: str | None = None,
    employee_id: str | None = None,
) -> Boarder:
    """Register a boarder and mark the assigned room occupied."""
    try:
        if room_id is not None:
            await _require_room(session, room_id)
        boarder = Boarder(
            boarder_id=boarder_id,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            contact_number=contact_number,
            email=email.lower(),
            room_id=room_id,
            caretaker_id=caretaker_id,
            employee_id=employee_id,
        )
        session.add(boarder)
        await session.flush()
        await occupancy_service.on_boarder_created(session, room_id=room_id)
        await session.commit()
    except NotFoundError:
        await session.rollback()
        raise
    except SQLAlchemyError as exc:
        raise await _rollback_and_wrap(session, exc, "create boarder") from exc

    logger.info("Boarder %s moved in (room %s)", boarder_id, room_id or "-")
    return await get_boarder(session, boarder_id=boarder_id)


async def update_boarder(
    session: AsyncSession, *, boarder_id: str, **changes: object
) -> Boarder:
    """Apply name, contact or staff changes; room moves use :func:`assign_room`."""
    unknown = set(changes) - set(_UPDATABLE_FIELDS)
    if unknown:
        raise ValueError(f"Unsupported boarder fields: {', '.join(sorted(unknown))}")

    boarder = await get_boarder(session, boarder_id=boarder_id)
    for field, value in changes.items():
        if value is None and field in {"first_name", "last_name", "email"}:
            continue
        if field == "email" and isinstance(value, str):
            value = value.lower()
        setattr(boarder, field, value)
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        raise await _rollback_and_wrap(session, exc, "update boarder") from exc
    return await get_boarder(session, boarder_id=boarder_id)


async def assign_room(
    session: AsyncSession, *, boarder_id: str, room_id: str | None
) -> Boarder:
    """Move a boarder to ``room_id`` or, with ``None``, move them out."""
    try:
        boarder = await get_boarder(session, boarder_id=boarder_id)
        old_room_id = boarder.room_id
        if old_room_id == room_id:
            return boarder
        if room_id is not None:
            await _require_room(session, room_id)

        boarder.room_id = room_id
        await session.flush()
        await occupancy_service.on_room_assignment_changed(
            session, old_room_id=old_room_id, new_room_id=room_id
        )
        await session.commit()
    except NotFoundError:
        await session.rollback()
        raise
    except SQLAlchemyError as exc:
        raise await _rollback_and_wrap(session, exc, "assign room") from exc

    logger.info(
        "Boarder %s moved from room %s to %s",
        boarder_id,
        old_room_id or "-",
        room_id or "-",
    )
    session.expire(boarder, ["room"])
    return await get_boarder(session, boarder_id=boarder_id)


async def delete_boarder(session: AsyncSession, *, boarder_id: str) -> BoarderRemoval:
    """Remove a boarder and every dependent record in one transaction.

    Order: guardians, payments, charges, deposit balance, bookings matched
    by name and contact number, the boarder, then release of the room.
    Bookings have no boarder key, so every booking sharing the boarder's
    first name, last name and contact number is removed; boarders without a
    contact number match no bookings.
    """
    settings = get_settings()

    async with boarder_locks.hold(boarder_id):
        try:
            result = await session.execute(
                select(Boarder).where(Boarder.boarder_id == boarder_id).with_for_update()
            )
            boarder = result.scalar_one_or_none()
            if boarder is None:
                raise NotFoundError("Boarder", boarder_id)
            room_id = boarder.room_id

            guardians = await session.execute(
                delete(Guardian).where(Guardian.boarder_id == boarder_id)
            )
            payments = await session.execute(
                delete(Payment).where(Payment.boarder_id == boarder_id)
            )
            charges = await session.execute(
                delete(Charge).where(Charge.boarder_id == boarder_id)
            )
            balances = await session.execute(
                delete(DepositBalance).where(DepositBalance.boarder_id == boarder_id)
            )
            bookings_removed = 0
            if settings.booking_name_match_cascade and boarder.contact_number:
                bookings = await session.execute(
                    delete(Booking).where(
                        Booking.first_name == boarder.first_name,
                        Booking.last_name == boarder.last_name,
                        Booking.contact_number == boarder.contact_number,
                    )
                )
                bookings_removed = bookings.rowcount
            await session.execute(delete(Boarder).where(Boarder.boarder_id == boarder_id))
            await occupancy_service.on_boarder_deleted(session, room_id=room_id)
            await session.commit()
        except NotFoundError:
            await session.rollback()
            logger.warning("Delete requested for unknown boarder %s", boarder_id)
            raise
        except SQLAlchemyError as exc:
            await session.rollback()
            raise StorageError(f"Could not delete boarder {boarder_id}: {exc}") from exc

    removal = BoarderRemoval(
        boarder_id=boarder_id,
        room_id=room_id,
        guardians=guardians.rowcount,
        payments=payments.rowcount,
        charges=charges.rowcount,
        deposit_balances=balances.rowcount,
        bookings=bookings_removed,
    )
    logger.info("Deleted boarder %s: %s", boarder_id, removal)
    return removal


async def add_guardian(
    session: AsyncSession,
    *,
    boarder_id: str,
    first_name: str,
    last_name: str,
    relationship_to_boarder: str | None = None,
    contact_number: str | None = None,
    address: str | None = None,
) -> Guardian:
    """Attach a guardian to an existing boarder."""
    await get_boarder(session, boarder_id=boarder_id)
    guardian = Guardian(
        boarder_id=boarder_id,
        first_name=first_name,
        last_name=last_name,
        relationship_to_boarder=relationship_to_boarder,
        contact_number=contact_number,
        address=address,
    )
    session.add(guardian)
    try:
        await session.commit()
    except SQLAlchemyError as exc:
        raise await _rollback_and_wrap(session, exc, "add guardian") from exc
    await session.refresh(guardian)
    return guardian


async def list_guardians(
    session: AsyncSession, *, boarder_id: str
) -> Sequence[Guardian]:
    await get_boarder(session, boarder_id=boarder_id)
    result = await session.execute(
        select(Guardian)
        .where(Guardian.boarder_id == boarder_id)
        .order_by(Guardian.created_at.asc())
    )
    return result.scalars().all()
