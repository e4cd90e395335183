"""Income reporting over payments and charges."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Final

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.models import Charge, Payment

_MONEY_PLACES: Final = Decimal("0.01")


def _to_money(value: Decimal | float | int | None) -> Decimal:
    return Decimal(value or 0).quantize(_MONEY_PLACES, rounding=ROUND_HALF_UP)


@dataclass(slots=True)
class IncomeSummary:
    """Totals for an inclusive date range."""

    start_date: date
    end_date: date
    total_payments: Decimal
    total_charges: Decimal
    net_income: Decimal


async def get_total_income(
    session: AsyncSession,
    *,
    start_date: date,
    end_date: date,
) -> IncomeSummary:
    """Sum payments and charges dated within ``[start_date, end_date]``."""
    if start_date > end_date:
        raise ValueError("start_date must be on or before end_date")

    payments = await session.scalar(
        select(func.coalesce(func.sum(Payment.amount), 0)).where(
            Payment.payment_date >= start_date,
            Payment.payment_date <= end_date,
        )
    )
    charges = await session.scalar(
        select(func.coalesce(func.sum(Charge.amount), 0)).where(
            Charge.charge_date >= start_date,
            Charge.charge_date <= end_date,
        )
    )
    total_payments = _to_money(payments)
    total_charges = _to_money(charges)
    return IncomeSummary(
        start_date=start_date,
        end_date=end_date,
        total_payments=total_payments,
        total_charges=total_charges,
        net_income=total_payments - total_charges,
    )
