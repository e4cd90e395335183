"""Administrative hierarchy: owners, caretakers and employees."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from boardinghouse.db.base import Base
from boardinghouse.models.mixins import TimestampMixin

if TYPE_CHECKING:
    from boardinghouse.models import Boarder


class Owner(TimestampMixin, Base):
    """Proprietor of the boarding house."""

    __tablename__ = "owners"

    owner_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    contact_number: Mapped[str | None] = mapped_column(String(32))
    email: Mapped[str | None] = mapped_column(String(255), unique=True)

    caretakers: Mapped[list["Caretaker"]] = relationship(
        "Caretaker", back_populates="owner"
    )


class Caretaker(TimestampMixin, Base):
    """Manager appointed by an owner to run day-to-day operations."""

    __tablename__ = "caretakers"

    caretaker_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        ForeignKey("owners.owner_id"), nullable=False
    )
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    contact_number: Mapped[str | None] = mapped_column(String(32))
    email: Mapped[str | None] = mapped_column(String(255), unique=True)

    owner: Mapped[Owner] = relationship("Owner", back_populates="caretakers")
    employees: Mapped[list["Employee"]] = relationship(
        "Employee", back_populates="caretaker"
    )
    boarders: Mapped[list["Boarder"]] = relationship(
        "Boarder", back_populates="caretaker"
    )


class Employee(TimestampMixin, Base):
    """Staff member reporting to a caretaker."""

    __tablename__ = "employees"

    employee_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    caretaker_id: Mapped[str] = mapped_column(
        ForeignKey("caretakers.caretaker_id"), nullable=False
    )
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    position: Mapped[str | None] = mapped_column(String(80))
    contact_number: Mapped[str | None] = mapped_column(String(32))

    caretaker: Mapped[Caretaker] = relationship("Caretaker", back_populates="employees")
