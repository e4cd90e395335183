"""Owner, caretaker and employee management helpers."""
from __future__ import annotations

from typing import Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.core.errors import DuplicateRecordError, NotFoundError, StorageError
from boardinghouse.db.base import Base
from boardinghouse.models import Caretaker, Employee, Owner

_ModelT = TypeVar("_ModelT", bound=Base)


async def _persist(session: AsyncSession, instance: _ModelT, label: str) -> _ModelT:
    session.add(instance)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise DuplicateRecordError(f"{label} conflicts with an existing record") from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        raise StorageError(f"Could not save {label}: {exc}") from exc
    await session.refresh(instance)
    return instance


async def create_owner(
    session: AsyncSession,
    *,
    owner_id: str,
    first_name: str,
    last_name: str,
    contact_number: str | None = None,
    email: str | None = None,
) -> Owner:
    owner = Owner(
        owner_id=owner_id,
        first_name=first_name,
        last_name=last_name,
        contact_number=contact_number,
        email=email.lower() if email else None,
    )
    return await _persist(session, owner, f"Owner {owner_id}")


async def get_owner(session: AsyncSession, *, owner_id: str) -> Owner:
    owner = await session.get(Owner, owner_id)
    if owner is None:
        raise NotFoundError("Owner", owner_id)
    return owner


async def list_owners(session: AsyncSession) -> Sequence[Owner]:
    result = await session.execute(select(Owner).order_by(Owner.owner_id))
    return result.scalars().all()


async def create_caretaker(
    session: AsyncSession,
    *,
    caretaker_id: str,
    owner_id: str,
    first_name: str,
    last_name: str,
    contact_number: str | None = None,
    email: str | None = None,
) -> Caretaker:
    """Create a caretaker reporting to an existing owner."""
    await get_owner(session, owner_id=owner_id)
    caretaker = Caretaker(
        caretaker_id=caretaker_id,
        owner_id=owner_id,
        first_name=first_name,
        last_name=last_name,
        contact_number=contact_number,
        email=email.lower() if email else None,
    )
    return await _persist(session, caretaker, f"Caretaker {caretaker_id}")


async def get_caretaker(session: AsyncSession, *, caretaker_id: str) -> Caretaker:
    caretaker = await session.get(Caretaker, caretaker_id)
    if caretaker is None:
        raise NotFoundError("Caretaker", caretaker_id)
    return caretaker


async def list_caretakers(
    session: AsyncSession, *, owner_id: str | None = None
) -> Sequence[Caretaker]:
    stmt = select(Caretaker).order_by(Caretaker.caretaker_id)
    if owner_id is not None:
        stmt = stmt.where(Caretaker.owner_id == owner_id)
    result = await session.execute(stmt)
    return result.scalars().all()


async def create_employee(
    session: AsyncSession,
    *,
    employee_id: str,
    caretaker_id: str,
    first_name: str,
    last_name: str,
    position: str | None = None,
    contact_number: str | None = None,
) -> Employee:
    """Create an employee under an existing caretaker."""
    await get_caretaker(session, caretaker_id=caretaker_id)
    employee = Employee(
        employee_id=employee_id,
        caretaker_id=caretaker_id,
        first_name=first_name,
        last_name=last_name,
        position=position,
        contact_number=contact_number,
    )
    return await _persist(session, employee, f"Employee {employee_id}")


async def list_employees(
    session: AsyncSession, *, caretaker_id: str | None = None
) -> Sequence[Employee]:
    stmt = select(Employee).order_by(Employee.employee_id)
    if caretaker_id is not None:
        stmt = stmt.where(Employee.caretaker_id == caretaker_id)
    result = await session.execute(stmt)
    return result.scalars().all()
