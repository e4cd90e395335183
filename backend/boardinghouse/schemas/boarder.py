"""Pydantic schemas for boarders and guardians."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from boardinghouse.models.room import RoomStatus


class BoarderBase(BaseModel):
    """Shared fields for boarders."""

    first_name: str = Field(min_length=1, max_length=120)
    middle_name: str | None = Field(default=None, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    contact_number: str | None = Field(default=None, max_length=32)
    email: EmailStr
    caretaker_id: str | None = None
    employee_id: str | None = None


class BoarderCreate(BoarderBase):
    """Payload for moving a boarder in."""

    boarder_id: str = Field(min_length=1, max_length=20)
    room_id: str | None = None


class BoarderUpdate(BaseModel):
    """Mutable boarder fields; the room is changed through the room endpoint."""

    first_name: str | None = Field(default=None, min_length=1, max_length=120)
    middle_name: str | None = None
    last_name: str | None = Field(default=None, min_length=1, max_length=120)
    contact_number: str | None = None
    email: EmailStr | None = None
    caretaker_id: str | None = None
    employee_id: str | None = None


class RoomAssignment(BaseModel):
    """Target room for a move; ``null`` moves the boarder out."""

    room_id: str | None = None


class BoarderRoomSummary(BaseModel):
    room_id: str
    floor: str
    status: RoomStatus

    model_config = ConfigDict(from_attributes=True)


class BoarderRead(BaseModel):
    """Serialized boarder representation."""

    boarder_id: str
    first_name: str
    middle_name: str | None
    last_name: str
    contact_number: str | None
    email: str
    room_id: str | None
    caretaker_id: str | None
    employee_id: str | None
    room: BoarderRoomSummary | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BoarderRemovalRead(BaseModel):
    """Counts of rows removed together with a boarder."""

    boarder_id: str
    room_id: str | None
    guardians: int
    payments: int
    charges: int
    deposit_balances: int
    bookings: int

    model_config = ConfigDict(from_attributes=True)


class GuardianCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    relationship_to_boarder: str | None = Field(default=None, max_length=60)
    contact_number: str | None = Field(default=None, max_length=32)
    address: str | None = Field(default=None, max_length=255)


class GuardianRead(GuardianCreate):
    id: uuid.UUID
    boarder_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
