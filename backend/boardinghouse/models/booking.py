"""Booking model for prospective boarders."""

from __future__ import annotations

import enum
import uuid
from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, Enum, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boardinghouse.db.base import Base
from boardinghouse.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from boardinghouse.models import Caretaker, Employee, Room


class BookingStatus(str, enum.Enum):
    """Lifecycle states for a booking."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Booking(TimestampMixin, Base):
    """Room reservation keyed by the guest's name and contact details.

    Bookings carry no boarder foreign key; they are linked to boarders only
    by first name, last name and contact number.
    """

    __tablename__ = "bookings"
    __table_args__ = (
        Index("ix_bookings_guest", "first_name", "last_name", "contact_number"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    room_id: Mapped[str] = mapped_column(ForeignKey("rooms.room_id"), nullable=False)
    caretaker_id: Mapped[str | None] = mapped_column(
        ForeignKey("caretakers.caretaker_id")
    )
    employee_id: Mapped[str | None] = mapped_column(ForeignKey("employees.employee_id"))
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    contact_number: Mapped[str | None] = mapped_column(String(32))
    booking_date: Mapped[date] = mapped_column(Date, nullable=False)
    move_in_date: Mapped[date | None] = mapped_column(Date)
    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus), nullable=False, default=BookingStatus.PENDING
    )

    room: Mapped["Room"] = relationship("Room")
    caretaker: Mapped[Optional["Caretaker"]] = relationship("Caretaker")
    employee: Mapped[Optional["Employee"]] = relationship("Employee")
