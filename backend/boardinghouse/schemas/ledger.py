"""Payment, charge and balance schemas."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PaymentCreate(BaseModel):
    """Payload for recording money received from a boarder."""

    amount: Decimal = Field(gt=Decimal("0"), decimal_places=2)
    payment_method: str = Field(min_length=1, max_length=40)
    payment_type: str = Field(min_length=1, max_length=40)
    payment_date: date | None = None


class PaymentRead(BaseModel):
    id: uuid.UUID
    boarder_id: str
    amount: Decimal
    payment_method: str
    payment_type: str
    payment_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ChargeCreate(BaseModel):
    """Payload for billing an amount against a boarder's deposit."""

    description: str = Field(min_length=1, max_length=255)
    charge_type: str = Field(min_length=1, max_length=40)
    amount: Decimal = Field(gt=Decimal("0"), decimal_places=2)
    charge_date: date | None = None


class ChargeRead(BaseModel):
    id: uuid.UUID
    boarder_id: str
    description: str
    charge_type: str
    amount: Decimal
    charge_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BalanceRead(BaseModel):
    boarder_id: str
    balance: Decimal


class StatementLineRead(BaseModel):
    entry_date: date
    kind: str
    description: str
    amount: Decimal

    model_config = ConfigDict(from_attributes=True)


class BalanceStatementRead(BaseModel):
    """Balance statement for one boarder."""

    boarder_id: str
    first_name: str
    last_name: str
    room_id: str | None
    balance: Decimal
    total_payments: Decimal
    total_charges: Decimal
    lines: list[StatementLineRead]

    model_config = ConfigDict(from_attributes=True)
