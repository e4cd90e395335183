"""Room schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from boardinghouse.models.room import RoomStatus


class RoomCreate(BaseModel):
    """Payload for adding a room to the inventory."""

    room_id: str = Field(min_length=1, max_length=20)
    floor: str = Field(min_length=1, max_length=20)
    rent_amount: Decimal = Field(ge=Decimal("0"), decimal_places=2)
    under_maintenance: bool = False


class RoomRentUpdate(BaseModel):
    rent_amount: Decimal = Field(ge=Decimal("0"), decimal_places=2)


class RoomRead(BaseModel):
    """Serialized room state."""

    room_id: str
    floor: str
    rent_amount: Decimal
    status: RoomStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
