"""Room inventory model."""

from __future__ import annotations

import enum
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Enum, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boardinghouse.db.base import Base
from boardinghouse.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from boardinghouse.models import Boarder


class RoomStatus(str, enum.Enum):
    """Occupancy state of a room."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class Room(TimestampMixin, Base):
    """Rentable room; status is derived from boarder assignments."""

    __tablename__ = "rooms"
    __table_args__ = (Index("ix_rooms_status", "status"),)

    room_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    floor: Mapped[str] = mapped_column(String(20), nullable=False)
    rent_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[RoomStatus] = mapped_column(
        Enum(RoomStatus), nullable=False, default=RoomStatus.AVAILABLE
    )

    boarders: Mapped[list["Boarder"]] = relationship("Boarder", back_populates="room")
