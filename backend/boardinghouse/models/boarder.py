"""Boarder and guardian models."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boardinghouse.db.base import Base
from boardinghouse.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from boardinghouse.models import (
        Caretaker,
        Charge,
        DepositBalance,
        Employee,
        Payment,
        Room,
    )


class Boarder(TimestampMixin, Base):
    """Person residing in a managed room."""

    __tablename__ = "boarders"
    __table_args__ = (Index("ix_boarders_room", "room_id"),)

    boarder_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(120))
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    contact_number: Mapped[str | None] = mapped_column(String(32))
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    room_id: Mapped[str | None] = mapped_column(ForeignKey("rooms.room_id"))
    caretaker_id: Mapped[str | None] = mapped_column(
        ForeignKey("caretakers.caretaker_id")
    )
    employee_id: Mapped[str | None] = mapped_column(ForeignKey("employees.employee_id"))

    room: Mapped[Optional["Room"]] = relationship("Room", back_populates="boarders")
    caretaker: Mapped[Optional["Caretaker"]] = relationship(
        "Caretaker", back_populates="boarders"
    )
    employee: Mapped[Optional["Employee"]] = relationship("Employee")
    guardians: Mapped[list["Guardian"]] = relationship(
        "Guardian", back_populates="boarder", passive_deletes=True
    )
    deposit_balance: Mapped[Optional["DepositBalance"]] = relationship(
        "DepositBalance", back_populates="boarder", uselist=False, passive_deletes=True
    )
    payments: Mapped[list["Payment"]] = relationship(
        "Payment", back_populates="boarder", order_by="Payment.payment_date"
    )
    charges: Mapped[list["Charge"]] = relationship(
        "Charge", back_populates="boarder", order_by="Charge.charge_date"
    )


class Guardian(TimestampMixin, Base):
    """Emergency contact or guardian attached to a boarder."""

    __tablename__ = "guardians"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    boarder_id: Mapped[str] = mapped_column(
        ForeignKey("boarders.boarder_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    relationship_to_boarder: Mapped[str | None] = mapped_column(String(60))
    contact_number: Mapped[str | None] = mapped_column(String(32))
    address: Mapped[str | None] = mapped_column(String(255))

    boarder: Mapped[Boarder] = relationship("Boarder", back_populates="guardians")
