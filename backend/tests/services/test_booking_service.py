from __future__ import annotations

import uuid

import pytest

from boardinghouse.core.errors import NotFoundError
from boardinghouse.models import BookingStatus, RoomStatus
from boardinghouse.services import booking_service, room_service

pytestmark = pytest.mark.asyncio


async def test_new_booking_is_pending_and_leaves_room_available(session) -> None:
    booking = await booking_service.create_booking(
        session, room_id="R101", first_name="Ivy", last_name="Tan"
    )

    assert booking.status == BookingStatus.PENDING
    room = await room_service.get_room(session, room_id="R101")
    assert room.status == RoomStatus.AVAILABLE


async def test_booking_transitions(session) -> None:
    booking = await booking_service.create_booking(
        session, room_id="R101", first_name="Ivy", last_name="Tan"
    )

    confirmed = await booking_service.update_status(
        session, booking_id=booking.id, status=BookingStatus.CONFIRMED
    )
    assert confirmed.status == BookingStatus.CONFIRMED

    with pytest.raises(ValueError):
        await booking_service.update_status(
            session, booking_id=booking.id, status=BookingStatus.PENDING
        )

    cancelled = await booking_service.update_status(
        session, booking_id=booking.id, status=BookingStatus.CANCELLED
    )
    assert cancelled.status == BookingStatus.CANCELLED

    with pytest.raises(ValueError):
        await booking_service.update_status(
            session, booking_id=booking.id, status=BookingStatus.CONFIRMED
        )


async def test_booking_requires_existing_room(session) -> None:
    with pytest.raises(NotFoundError):
        await booking_service.create_booking(
            session, room_id="R999", first_name="Ivy", last_name="Tan"
        )
    with pytest.raises(NotFoundError):
        await booking_service.get_booking(session, booking_id=uuid.uuid4())


async def test_list_bookings_filters(session) -> None:
    first = await booking_service.create_booking(
        session, room_id="R101", first_name="Ivy", last_name="Tan"
    )
    await booking_service.create_booking(
        session, room_id="R102", first_name="Jo", last_name="Uy"
    )
    await booking_service.update_status(
        session, booking_id=first.id, status=BookingStatus.CONFIRMED
    )

    confirmed = await booking_service.list_bookings(
        session, status=BookingStatus.CONFIRMED
    )
    in_r102 = await booking_service.list_bookings(session, room_id="R102")

    assert [b.id for b in confirmed] == [first.id]
    assert [b.last_name for b in in_r102] == ["Uy"]
