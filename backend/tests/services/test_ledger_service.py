"""Tests for deposit balance bookkeeping on payments and charges."""

from __future__ import annotations

import asyncio
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from boardinghouse.core.errors import (
    ConcurrencyConflictError,
    InsufficientBalanceError,
    InvalidAmountError,
    NotFoundError,
    StorageError,
)
from boardinghouse.db.session import get_sessionmaker
from boardinghouse.models import Charge, DepositBalance, Payment
from boardinghouse.services import boarder_locks, boarder_service, ledger_service

pytestmark = pytest.mark.asyncio


async def _move_in(session, boarder_id: str = "B001", room_id: str | None = "R101"):
    return await boarder_service.create_boarder(
        session,
        boarder_id=boarder_id,
        first_name="Bea",
        last_name="Cruz",
        email=f"{boarder_id.lower()}@example.com",
        contact_number="09171234567",
        room_id=room_id,
    )


async def _pay(session, amount: str, boarder_id: str = "B001") -> Payment:
    return await ledger_service.record_payment(
        session,
        boarder_id=boarder_id,
        amount=Decimal(amount),
        payment_method="cash",
        payment_type="deposit",
    )


async def _charge(session, amount: str, boarder_id: str = "B001") -> Charge:
    return await ledger_service.record_charge(
        session,
        boarder_id=boarder_id,
        description="Monthly rent",
        charge_type="rent",
        amount=Decimal(amount),
    )


async def _count(session, model, boarder_id: str = "B001") -> int:
    return await session.scalar(
        select(func.count()).select_from(model).where(model.boarder_id == boarder_id)
    )


async def test_balance_is_zero_before_first_payment(session) -> None:
    await _move_in(session)
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal("0")
    assert await _count(session, DepositBalance) == 0


async def test_first_payment_creates_balance_row(session) -> None:
    await _move_in(session)

    payment = await _pay(session, "5000.00")

    assert payment.amount == Decimal("5000.00")
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "5000.00"
    )
    assert await _count(session, DepositBalance) == 1


async def test_payments_accumulate_on_single_balance_row(session) -> None:
    await _move_in(session)

    await _pay(session, "1500.00")
    await _pay(session, "250.50")

    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "1750.50"
    )
    assert await _count(session, DepositBalance) == 1
    assert await _count(session, Payment) == 2


async def test_charge_debits_balance(session) -> None:
    await _move_in(session)
    await _pay(session, "5000.00")

    charge = await _charge(session, "3000.00")

    assert charge.amount == Decimal("3000.00")
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "2000.00"
    )


async def test_charge_may_consume_entire_balance(session) -> None:
    await _move_in(session)
    await _pay(session, "1200.00")

    await _charge(session, "1200.00")

    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal("0")


async def test_overdrawing_charge_is_rejected_without_writing(session) -> None:
    await _move_in(session)
    await _pay(session, "5000.00")
    await _charge(session, "3000.00")

    with pytest.raises(InsufficientBalanceError) as excinfo:
        await _charge(session, "5000.00")

    assert excinfo.value.balance == Decimal("2000.00")
    assert excinfo.value.requested == Decimal("5000.00")
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "2000.00"
    )
    assert await _count(session, Charge) == 1


async def test_charge_without_any_payment_is_rejected(session) -> None:
    await _move_in(session)

    with pytest.raises(InsufficientBalanceError):
        await _charge(session, "1.00")

    assert await _count(session, Charge) == 0
    assert await _count(session, DepositBalance) == 0


@pytest.mark.parametrize("amount", ["0", "-10.00", "0.001"])
async def test_non_positive_amounts_are_rejected(session, amount: str) -> None:
    await _move_in(session)

    with pytest.raises(InvalidAmountError):
        await _pay(session, amount)
    with pytest.raises(InvalidAmountError):
        await _charge(session, amount)

    assert await _count(session, Payment) == 0
    assert await _count(session, Charge) == 0


async def test_unknown_boarder_is_reported(session) -> None:
    with pytest.raises(NotFoundError):
        await _pay(session, "100.00", boarder_id="B404")
    with pytest.raises(NotFoundError):
        await _charge(session, "100.00", boarder_id="B404")
    with pytest.raises(NotFoundError):
        await ledger_service.get_balance(session, boarder_id="B404")

    assert await _count(session, Payment, "B404") == 0


async def test_balance_tracks_ledger_sums_and_never_goes_negative(session) -> None:
    await _move_in(session)
    operations = [
        ("pay", "1000.00"),
        ("charge", "400.00"),
        ("charge", "700.00"),
        ("pay", "250.00"),
        ("charge", "850.00"),
        ("charge", "1.00"),
        ("pay", "99.50"),
        ("charge", "99.50"),
    ]
    paid = Decimal("0")
    charged = Decimal("0")
    for kind, amount in operations:
        try:
            if kind == "pay":
                await _pay(session, amount)
                paid += Decimal(amount)
            else:
                await _charge(session, amount)
                charged += Decimal(amount)
        except InsufficientBalanceError:
            pass
        balance = await ledger_service.get_balance(session, boarder_id="B001")
        assert balance >= Decimal("0")
        assert balance == paid - charged

    payments_total = await session.scalar(
        select(func.sum(Payment.amount)).where(Payment.boarder_id == "B001")
    )
    charges_total = await session.scalar(
        select(func.sum(Charge.amount)).where(Charge.boarder_id == "B001")
    )
    assert Decimal(payments_total) - Decimal(charges_total) == paid - charged


async def test_concurrent_charges_cannot_overdraw(session, db_url: str) -> None:
    await _move_in(session)
    await _pay(session, "5000.00")

    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as first, sessionmaker() as second:
        results = await asyncio.gather(
            _charge(first, "3000.00"),
            _charge(second, "3000.00"),
            return_exceptions=True,
        )

    failures = [r for r in results if isinstance(r, BaseException)]
    assert len(failures) == 1
    assert isinstance(failures[0], InsufficientBalanceError)
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "2000.00"
    )
    assert await _count(session, Charge) == 1
    assert boarder_locks.active_keys() == []


async def test_concurrent_first_payments_share_one_balance_row(
    session, db_url: str
) -> None:
    await _move_in(session)

    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as first, sessionmaker() as second:
        await asyncio.gather(_pay(first, "300.00"), _pay(second, "200.00"))

    assert await _count(session, DepositBalance) == 1
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "500.00"
    )


async def test_ledger_listings_are_date_ordered(session) -> None:
    await _move_in(session)

    await ledger_service.record_payment(
        session,
        boarder_id="B001",
        amount=Decimal("100.00"),
        payment_method="gcash",
        payment_type="rent",
        payment_date=date(2025, 3, 1),
    )
    await ledger_service.record_payment(
        session,
        boarder_id="B001",
        amount=Decimal("200.00"),
        payment_method="cash",
        payment_type="deposit",
        payment_date=date(2025, 1, 15),
    )

    payments = await ledger_service.list_payments(session, boarder_id="B001")
    assert [p.payment_date for p in payments] == [date(2025, 1, 15), date(2025, 3, 1)]
    assert await ledger_service.list_charges(session, boarder_id="B001") == []


async def test_fractional_balance_can_be_charged_in_full(session) -> None:
    await _move_in(session)
    await _pay(session, "0.70")
    await _pay(session, "0.10")
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "0.80"
    )

    await _charge(session, "0.80")

    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal("0")
    assert await _count(session, Charge) == 1


async def test_many_small_payments_do_not_drift(session) -> None:
    await _move_in(session)
    for _ in range(10):
        await _pay(session, "0.10")
    await _pay(session, "0.20")

    await _charge(session, "0.30")
    await _charge(session, "0.80")
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "0.10"
    )

    with pytest.raises(InsufficientBalanceError):
        await _charge(session, "0.11")
    await _charge(session, "0.10")
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal("0")


async def test_integrity_failure_on_payment_is_storage_error(
    session, monkeypatch
) -> None:
    async def skip_lookup(*_args, **_kwargs) -> None:
        return None

    monkeypatch.setattr(ledger_service, "_require_boarder", skip_lookup)

    with pytest.raises(StorageError):
        await _pay(session, "100.00", boarder_id="B404")

    assert await _count(session, Payment, "B404") == 0
    assert await _count(session, DepositBalance, "B404") == 0


async def test_balance_that_keeps_changing_gives_up(session, monkeypatch) -> None:
    await _move_in(session)
    await _pay(session, "500.00")

    async def always_stale(_session, row, _new_balance) -> None:
        raise ledger_service._StaleBalance(row.boarder_id)

    monkeypatch.setattr(ledger_service, "_write_balance", always_stale)

    with pytest.raises(ConcurrencyConflictError):
        await _charge(session, "100.00")
    with pytest.raises(ConcurrencyConflictError):
        await _pay(session, "100.00")

    monkeypatch.undo()
    assert await ledger_service.get_balance(session, boarder_id="B001") == Decimal(
        "500.00"
    )
    assert await _count(session, Charge) == 0
    assert await _count(session, Payment) == 1
    assert boarder_locks.active_keys() == []
