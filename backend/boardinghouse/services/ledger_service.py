"""Deposit balance ledger: payments credit a boarder, charges debit them.

Every public operation runs as a single transaction on the supplied session.
The payment/charge row and the matching balance change are committed
together or not at all, and a charge that would overdraw the balance is
rejected before any charge row is written.

Balances are computed in Python with ``Decimal`` and written back as
absolute values guarded by the cent-rounded previous value, so backends
that store ``Numeric`` as binary floats never accumulate drift.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Final, Sequence

from sqlalchemy import Numeric, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import set_committed_value

from boardinghouse.core.config import get_settings
from boardinghouse.core.errors import (
    ConcurrencyConflictError,
    InsufficientBalanceError,
    InvalidAmountError,
    NotFoundError,
    StorageError,
)
from boardinghouse.models import Boarder, Charge, DepositBalance, Payment
from boardinghouse.services import boarder_locks

logger = logging.getLogger(__name__)

_CURRENCY_UNIT: Final = Decimal("0.01")
_ZERO: Final = Decimal("0.00")
_MONEY_TYPE: Final = Numeric(12, 2)


class _StaleBalance(Exception):
    """The balance row changed between the locked read and the write."""


def _to_money(value: Decimal | float | str) -> Decimal:
    return Decimal(value).quantize(_CURRENCY_UNIT, rounding=ROUND_HALF_UP)


def _positive_amount(amount: Decimal | float | str) -> Decimal:
    normalized = _to_money(amount)
    if normalized <= _ZERO:
        raise InvalidAmountError(normalized)
    return normalized


def _check_retry_budget(
    boarder_id: str, attempt: int, max_attempts: int, exc: Exception
) -> None:
    if attempt >= max_attempts:
        raise ConcurrencyConflictError(
            f"Balance for boarder {boarder_id} kept changing; "
            f"gave up after {attempt} attempts"
        ) from exc
    logger.info(
        "Balance for boarder %s changed concurrently, retrying (%s/%s)",
        boarder_id,
        attempt,
        max_attempts,
    )


async def _require_boarder(session: AsyncSession, boarder_id: str) -> None:
    exists = await session.scalar(
        select(Boarder.boarder_id).where(Boarder.boarder_id == boarder_id)
    )
    if exists is None:
        raise NotFoundError("Boarder", boarder_id)


async def _locked_balance_row(
    session: AsyncSession, boarder_id: str
) -> DepositBalance | None:
    """Load the balance row under a row lock; ``None`` when none exists yet."""
    return await session.scalar(
        select(DepositBalance)
        .where(DepositBalance.boarder_id == boarder_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )


async def _write_balance(
    session: AsyncSession, row: DepositBalance, new_balance: Decimal
) -> None:
    """Replace the balance only if it still rounds to the value read into ``row``."""
    expected = _to_money(row.balance)
    result = await session.execute(
        update(DepositBalance)
        .where(
            DepositBalance.id == row.id,
            func.round(DepositBalance.balance, 2, type_=_MONEY_TYPE) == expected,
        )
        .values(balance=new_balance)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        raise _StaleBalance(row.boarder_id)
    set_committed_value(row, "balance", new_balance)


async def get_balance(session: AsyncSession, *, boarder_id: str) -> Decimal:
    """Return the boarder's balance, or zero when no ledger row exists yet."""

    await _require_boarder(session, boarder_id)
    balance = await session.scalar(
        select(DepositBalance.balance).where(DepositBalance.boarder_id == boarder_id)
    )
    return _to_money(balance) if balance is not None else _ZERO


async def record_payment(
    session: AsyncSession,
    *,
    boarder_id: str,
    amount: Decimal,
    payment_method: str,
    payment_type: str,
    payment_date: date | None = None,
) -> Payment:
    """Append a payment and credit the boarder's deposit balance atomically.

    A balance row that changed under us, or two first payments racing to
    create the same row, are rolled back and retried up to
    ``LEDGER_MAX_ATTEMPTS`` times before ``ConcurrencyConflictError``. Any
    other integrity failure is a ``StorageError``.
    """

    normalized = _positive_amount(amount)
    max_attempts = get_settings().ledger_max_attempts

    attempt = 0
    async with boarder_locks.hold(boarder_id):
        while True:
            attempt += 1
            creating_row = False
            try:
                await _require_boarder(session, boarder_id)
                payment = Payment(
                    boarder_id=boarder_id,
                    amount=normalized,
                    payment_method=payment_method,
                    payment_type=payment_type,
                    payment_date=payment_date or date.today(),
                )
                session.add(payment)
                await session.flush()

                row = await _locked_balance_row(session, boarder_id)
                if row is None:
                    creating_row = True
                    session.add(DepositBalance(boarder_id=boarder_id, balance=normalized))
                    await session.flush()
                else:
                    await _write_balance(
                        session, row, _to_money(row.balance) + normalized
                    )
                await session.commit()
            except NotFoundError:
                await session.rollback()
                logger.warning("Payment rejected: boarder %s not found", boarder_id)
                raise
            except _StaleBalance as exc:
                await session.rollback()
                _check_retry_budget(boarder_id, attempt, max_attempts, exc)
                continue
            except IntegrityError as exc:
                await session.rollback()
                if not creating_row:
                    raise StorageError(f"Could not record payment: {exc}") from exc
                _check_retry_budget(boarder_id, attempt, max_attempts, exc)
                continue
            except SQLAlchemyError as exc:
                await session.rollback()
                raise StorageError(f"Could not record payment: {exc}") from exc

            logger.info("Recorded payment of %s for boarder %s", normalized, boarder_id)
            return payment


async def record_charge(
    session: AsyncSession,
    *,
    boarder_id: str,
    description: str,
    charge_type: str,
    amount: Decimal,
    charge_date: date | None = None,
) -> Charge:
    """Debit the boarder's balance and append the charge, or reject both.

    The balance check happens before the charge row is written. The debit is
    conditional on the balance read under the lock, so a writer outside this
    process forces a re-read instead of an overdraft.
    """

    normalized = _positive_amount(amount)
    max_attempts = get_settings().ledger_max_attempts

    attempt = 0
    async with boarder_locks.hold(boarder_id):
        while True:
            attempt += 1
            try:
                await _require_boarder(session, boarder_id)
                row = await _locked_balance_row(session, boarder_id)
                current = _ZERO if row is None else _to_money(row.balance)
                if current < normalized:
                    raise InsufficientBalanceError(boarder_id, current, normalized)

                await _write_balance(session, row, current - normalized)
                charge = Charge(
                    boarder_id=boarder_id,
                    description=description,
                    charge_type=charge_type,
                    amount=normalized,
                    charge_date=charge_date or date.today(),
                )
                session.add(charge)
                await session.commit()
            except NotFoundError:
                await session.rollback()
                logger.warning("Charge rejected: boarder %s not found", boarder_id)
                raise
            except InsufficientBalanceError as exc:
                await session.rollback()
                logger.warning(
                    "Charge of %s rejected for boarder %s: balance %s",
                    exc.requested,
                    boarder_id,
                    exc.balance,
                )
                raise
            except _StaleBalance as exc:
                await session.rollback()
                _check_retry_budget(boarder_id, attempt, max_attempts, exc)
                continue
            except SQLAlchemyError as exc:
                await session.rollback()
                raise StorageError(f"Could not record charge: {exc}") from exc

            logger.info("Recorded charge of %s for boarder %s", normalized, boarder_id)
            return charge


async def list_payments(
    session: AsyncSession, *, boarder_id: str
) -> Sequence[Payment]:
    """Return a boarder's payments, oldest first."""
    await _require_boarder(session, boarder_id)
    result = await session.execute(
        select(Payment)
        .where(Payment.boarder_id == boarder_id)
        .order_by(Payment.payment_date.asc(), Payment.created_at.asc())
    )
    return result.scalars().all()


async def list_charges(session: AsyncSession, *, boarder_id: str) -> Sequence[Charge]:
    """Return a boarder's charges, oldest first."""
    await _require_boarder(session, boarder_id)
    result = await session.execute(
        select(Charge)
        .where(Charge.boarder_id == boarder_id)
        .order_by(Charge.charge_date.asc(), Charge.created_at.asc())
    )
    return result.scalars().all()
