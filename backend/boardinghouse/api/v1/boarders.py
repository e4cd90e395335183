"""Boarder lifecycle endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.api import deps
from boardinghouse.core.errors import BoardingError
from boardinghouse.schemas.boarder import (
    BoarderCreate,
    BoarderRead,
    BoarderRemovalRead,
    BoarderUpdate,
    GuardianCreate,
    GuardianRead,
    RoomAssignment,
)
from boardinghouse.schemas.reporting import BoarderRoomEntry
from boardinghouse.services import boarder_service, statement_service

router = APIRouter()


@router.get("", response_model=list[BoarderRead], summary="List boarders")
async def list_boarders(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    room_id: str | None = Query(default=None),
    skip: int = 0,
    limit: int = 50,
) -> list[BoarderRead]:
    boarders = await boarder_service.list_boarders(
        session, room_id=room_id, skip=skip, limit=min(limit, 200)
    )
    return [BoarderRead.model_validate(boarder) for boarder in boarders]


@router.get(
    "/rooms", response_model=list[BoarderRoomEntry], summary="Boarders with rooms"
)
async def boarder_room_view(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[BoarderRoomEntry]:
    rows = await statement_service.boarder_room_view(session)
    return [BoarderRoomEntry.model_validate(row) for row in rows]


@router.post(
    "",
    response_model=BoarderRead,
    status_code=status.HTTP_201_CREATED,
    summary="Move a boarder in",
)
async def create_boarder(
    payload: BoarderCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BoarderRead:
    try:
        boarder = await boarder_service.create_boarder(session, **payload.model_dump())
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return BoarderRead.model_validate(boarder)


@router.get("/{boarder_id}", response_model=BoarderRead, summary="Get boarder")
async def get_boarder(
    boarder_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BoarderRead:
    try:
        boarder = await boarder_service.get_boarder(session, boarder_id=boarder_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return BoarderRead.model_validate(boarder)


@router.patch("/{boarder_id}", response_model=BoarderRead, summary="Update boarder")
async def update_boarder(
    boarder_id: str,
    payload: BoarderUpdate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BoarderRead:
    try:
        boarder = await boarder_service.update_boarder(
            session, boarder_id=boarder_id, **payload.model_dump(exclude_unset=True)
        )
    except (BoardingError, ValueError) as exc:
        raise deps.http_error(exc) from exc
    return BoarderRead.model_validate(boarder)


@router.put(
    "/{boarder_id}/room", response_model=BoarderRead, summary="Move boarder"
)
async def assign_room(
    boarder_id: str,
    payload: RoomAssignment,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BoarderRead:
    """Move the boarder to another room, or out when ``room_id`` is null."""
    try:
        boarder = await boarder_service.assign_room(
            session, boarder_id=boarder_id, room_id=payload.room_id
        )
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return BoarderRead.model_validate(boarder)


@router.delete(
    "/{boarder_id}", response_model=BoarderRemovalRead, summary="Delete boarder"
)
async def delete_boarder(
    boarder_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BoarderRemovalRead:
    """Remove the boarder together with guardians, ledger rows and bookings."""
    try:
        removal = await boarder_service.delete_boarder(session, boarder_id=boarder_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return BoarderRemovalRead.model_validate(removal)


@router.get(
    "/{boarder_id}/guardians",
    response_model=list[GuardianRead],
    summary="List guardians",
)
async def list_guardians(
    boarder_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[GuardianRead]:
    try:
        guardians = await boarder_service.list_guardians(session, boarder_id=boarder_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return [GuardianRead.model_validate(guardian) for guardian in guardians]


@router.post(
    "/{boarder_id}/guardians",
    response_model=GuardianRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add guardian",
)
async def add_guardian(
    boarder_id: str,
    payload: GuardianCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> GuardianRead:
    try:
        guardian = await boarder_service.add_guardian(
            session, boarder_id=boarder_id, **payload.model_dump()
        )
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return GuardianRead.model_validate(guardian)
