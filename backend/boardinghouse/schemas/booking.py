"""Booking schemas."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from boardinghouse.models.booking import BookingStatus


class BookingCreate(BaseModel):
    room_id: str
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    contact_number: str | None = Field(default=None, max_length=32)
    booking_date: date | None = None
    move_in_date: date | None = None
    caretaker_id: str | None = None
    employee_id: str | None = None


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingRead(BaseModel):
    id: uuid.UUID
    room_id: str
    first_name: str
    last_name: str
    contact_number: str | None
    booking_date: date
    move_in_date: date | None
    caretaker_id: str | None
    employee_id: str | None
    status: BookingStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
