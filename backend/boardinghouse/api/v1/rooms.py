"""Room inventory and maintenance endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.api import deps
from boardinghouse.core.errors import BoardingError
from boardinghouse.models.room import RoomStatus
from boardinghouse.schemas.room import RoomCreate, RoomRead, RoomRentUpdate
from boardinghouse.services import occupancy_service, room_service

router = APIRouter()


@router.get("", response_model=list[RoomRead], summary="List rooms")
async def list_rooms(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    room_status: RoomStatus | None = Query(default=None, alias="status"),
    floor: str | None = Query(default=None),
) -> list[RoomRead]:
    rooms = await room_service.list_rooms(session, status=room_status, floor=floor)
    return [RoomRead.model_validate(room) for room in rooms]


@router.post(
    "",
    response_model=RoomRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create room",
)
async def create_room(
    payload: RoomCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomRead:
    try:
        room = await room_service.create_room(session, **payload.model_dump())
    except (BoardingError, ValueError) as exc:
        raise deps.http_error(exc) from exc
    return RoomRead.model_validate(room)


@router.get("/{room_id}", response_model=RoomRead, summary="Get room")
async def get_room(
    room_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomRead:
    try:
        room = await room_service.get_room(session, room_id=room_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return RoomRead.model_validate(room)


@router.patch("/{room_id}/rent", response_model=RoomRead, summary="Change rent")
async def update_rent(
    room_id: str,
    payload: RoomRentUpdate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomRead:
    try:
        room = await room_service.update_rent(
            session, room_id=room_id, rent_amount=payload.rent_amount
        )
    except (BoardingError, ValueError) as exc:
        raise deps.http_error(exc) from exc
    return RoomRead.model_validate(room)


@router.post(
    "/{room_id}/maintenance", response_model=RoomRead, summary="Mark maintenance"
)
async def mark_maintenance(
    room_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomRead:
    try:
        room = await occupancy_service.mark_maintenance(session, room_id=room_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return RoomRead.model_validate(room)


@router.delete(
    "/{room_id}/maintenance", response_model=RoomRead, summary="Clear maintenance"
)
async def clear_maintenance(
    room_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> RoomRead:
    try:
        room = await occupancy_service.clear_maintenance(session, room_id=room_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return RoomRead.model_validate(room)
