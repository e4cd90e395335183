"""Deposit balance, payment and charge ledger models."""

from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boardinghouse.db.base import Base
from boardinghouse.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing only
    from boardinghouse.models import Boarder


class DepositBalance(TimestampMixin, Base):
    """Running balance per boarder: payments minus charges."""

    __tablename__ = "deposit_balances"
    __table_args__ = (
        CheckConstraint("balance >= 0", name="balance_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    boarder_id: Mapped[str] = mapped_column(
        ForeignKey("boarders.boarder_id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    balance: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0.00")
    )

    boarder: Mapped["Boarder"] = relationship(
        "Boarder", back_populates="deposit_balance"
    )


class Payment(TimestampMixin, Base):
    """Append-only record of money received from a boarder."""

    __tablename__ = "payments"
    __table_args__ = (
        Index("ix_payments_boarder", "boarder_id"),
        Index("ix_payments_date", "payment_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    boarder_id: Mapped[str] = mapped_column(
        ForeignKey("boarders.boarder_id"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    payment_method: Mapped[str] = mapped_column(String(40), nullable=False)
    payment_type: Mapped[str] = mapped_column(String(40), nullable=False)
    payment_date: Mapped[date] = mapped_column(Date, nullable=False)

    boarder: Mapped["Boarder"] = relationship("Boarder", back_populates="payments")


class Charge(TimestampMixin, Base):
    """Append-only record of an amount billed against a boarder's deposit."""

    __tablename__ = "charges"
    __table_args__ = (
        Index("ix_charges_boarder", "boarder_id"),
        Index("ix_charges_date", "charge_date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    boarder_id: Mapped[str] = mapped_column(
        ForeignKey("boarders.boarder_id"), nullable=False
    )
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    charge_type: Mapped[str] = mapped_column(String(40), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    charge_date: Mapped[date] = mapped_column(Date, nullable=False)

    boarder: Mapped["Boarder"] = relationship("Boarder", back_populates="charges")
