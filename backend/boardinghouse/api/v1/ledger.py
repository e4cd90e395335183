"""Deposit ledger endpoints: payments, charges, balances and statements."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.api import deps
from boardinghouse.core.errors import BoardingError
from boardinghouse.schemas.ledger import (
    BalanceRead,
    BalanceStatementRead,
    ChargeCreate,
    ChargeRead,
    PaymentCreate,
    PaymentRead,
)
from boardinghouse.services import ledger_service, statement_service

router = APIRouter()


@router.post(
    "/{boarder_id}/payments",
    response_model=PaymentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record payment",
)
async def record_payment(
    boarder_id: str,
    payload: PaymentCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> PaymentRead:
    try:
        payment = await ledger_service.record_payment(
            session, boarder_id=boarder_id, **payload.model_dump()
        )
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return PaymentRead.model_validate(payment)


@router.get(
    "/{boarder_id}/payments",
    response_model=list[PaymentRead],
    summary="List payments",
)
async def list_payments(
    boarder_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[PaymentRead]:
    try:
        payments = await ledger_service.list_payments(session, boarder_id=boarder_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return [PaymentRead.model_validate(payment) for payment in payments]


@router.post(
    "/{boarder_id}/charges",
    response_model=ChargeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record charge",
)
async def record_charge(
    boarder_id: str,
    payload: ChargeCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> ChargeRead:
    """Bill the boarder's deposit; rejected with 409 when funds are short."""
    try:
        charge = await ledger_service.record_charge(
            session, boarder_id=boarder_id, **payload.model_dump()
        )
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return ChargeRead.model_validate(charge)


@router.get(
    "/{boarder_id}/charges", response_model=list[ChargeRead], summary="List charges"
)
async def list_charges(
    boarder_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[ChargeRead]:
    try:
        charges = await ledger_service.list_charges(session, boarder_id=boarder_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return [ChargeRead.model_validate(charge) for charge in charges]


@router.get("/{boarder_id}/balance", response_model=BalanceRead, summary="Balance")
async def get_balance(
    boarder_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BalanceRead:
    try:
        balance = await ledger_service.get_balance(session, boarder_id=boarder_id)
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return BalanceRead(boarder_id=boarder_id, balance=balance)


@router.get(
    "/{boarder_id}/statement",
    response_model=BalanceStatementRead,
    summary="Balance statement",
)
async def balance_statement(
    boarder_id: str,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> BalanceStatementRead:
    try:
        statement = await statement_service.balance_statement(
            session, boarder_id=boarder_id
        )
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return BalanceStatementRead.model_validate(statement)
