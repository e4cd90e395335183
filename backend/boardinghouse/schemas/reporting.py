"""Reporting schemas."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from boardinghouse.models.room import RoomStatus


class IncomeReport(BaseModel):
    """Payments, charges and net income for a date range."""

    start_date: date
    end_date: date
    total_payments: Decimal
    total_charges: Decimal
    net_income: Decimal

    model_config = ConfigDict(from_attributes=True)


class BoarderRoomEntry(BaseModel):
    """Boarder joined with their current room."""

    boarder_id: str
    first_name: str
    last_name: str
    contact_number: str | None = None
    email: str
    room_id: str | None = None
    floor: str | None = None
    rent_amount: Decimal | None = None
    room_status: RoomStatus | None = None

    model_config = ConfigDict(from_attributes=True)
