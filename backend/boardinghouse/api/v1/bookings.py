"""Booking endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.api import deps
from boardinghouse.core.errors import BoardingError
from boardinghouse.models.booking import BookingStatus
from boardinghouse.schemas.booking import (
    BookingCreate,
    BookingRead,
    BookingStatusUpdate,
)
from boardinghouse.services import booking_service

router = APIRouter()


@router.get("", response_model=list[BookingRead], summary="List bookings")
async def list_bookings(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    booking_status: BookingStatus | None = Query(default=None, alias="status"),
    room_id: str | None = Query(default=None),
) -> list[BookingRead]:
    bookings = await booking_service.list_bookings(
        session, status=booking_status, room_id=room_id
    )
    return [BookingRead.model_validate(booking) for booking in bookings]


@router.post(
    "",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create booking",
)
async def create_booking(
    payload: BookingCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BookingRead:
    try:
        booking = await booking_service.create_booking(session, **payload.model_dump())
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return BookingRead.model_validate(booking)


@router.patch(
    "/{booking_id}/status", response_model=BookingRead, summary="Change status"
)
async def update_booking_status(
    booking_id: uuid.UUID,
    payload: BookingStatusUpdate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BookingRead:
    try:
        booking = await booking_service.update_status(
            session, booking_id=booking_id, status=payload.status
        )
    except (BoardingError, ValueError) as exc:
        raise deps.http_error(exc) from exc
    return BookingRead.model_validate(booking)
