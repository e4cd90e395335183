"""Reporting endpoints."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.api import deps
from boardinghouse.schemas.reporting import IncomeReport
from boardinghouse.services import reporting_service

router = APIRouter()


@router.get("/income", response_model=IncomeReport, summary="Income report")
async def income_report(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    start_date: date = Query(...),
    end_date: date = Query(...),
) -> IncomeReport:
    try:
        summary = await reporting_service.get_total_income(
            session, start_date=start_date, end_date=end_date
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return IncomeReport.model_validate(summary)
