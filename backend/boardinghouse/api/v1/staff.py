"""Owner, caretaker and employee endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.api import deps
from boardinghouse.core.errors import BoardingError
from boardinghouse.schemas.staff import (
    CaretakerCreate,
    CaretakerRead,
    EmployeeCreate,
    EmployeeRead,
    OwnerCreate,
    OwnerRead,
)
from boardinghouse.services import staff_service

router = APIRouter()


@router.get("/owners", response_model=list[OwnerRead], summary="List owners")
async def list_owners(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[OwnerRead]:
    owners = await staff_service.list_owners(session)
    return [OwnerRead.model_validate(owner) for owner in owners]


@router.post(
    "/owners",
    response_model=OwnerRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create owner",
)
async def create_owner(
    payload: OwnerCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> OwnerRead:
    try:
        owner = await staff_service.create_owner(session, **payload.model_dump())
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return OwnerRead.model_validate(owner)


@router.get(
    "/caretakers", response_model=list[CaretakerRead], summary="List caretakers"
)
async def list_caretakers(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    owner_id: str | None = Query(default=None),
) -> list[CaretakerRead]:
    caretakers = await staff_service.list_caretakers(session, owner_id=owner_id)
    return [CaretakerRead.model_validate(caretaker) for caretaker in caretakers]


@router.post(
    "/caretakers",
    response_model=CaretakerRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create caretaker",
)
async def create_caretaker(
    payload: CaretakerCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> CaretakerRead:
    try:
        caretaker = await staff_service.create_caretaker(
            session, **payload.model_dump()
        )
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return CaretakerRead.model_validate(caretaker)


@router.get("/employees", response_model=list[EmployeeRead], summary="List employees")
async def list_employees(
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
    caretaker_id: str | None = Query(default=None),
) -> list[EmployeeRead]:
    employees = await staff_service.list_employees(session, caretaker_id=caretaker_id)
    return [EmployeeRead.model_validate(employee) for employee in employees]


@router.post(
    "/employees",
    response_model=EmployeeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create employee",
)
async def create_employee(
    payload: EmployeeCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> EmployeeRead:
    try:
        employee = await staff_service.create_employee(session, **payload.model_dump())
    except BoardingError as exc:
        raise deps.http_error(exc) from exc
    return EmployeeRead.model_validate(employee)
