"""Owner, caretaker and employee schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class OwnerCreate(BaseModel):
    owner_id: str = Field(min_length=1, max_length=20)
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    contact_number: str | None = None
    email: EmailStr | None = None


class OwnerRead(BaseModel):
    owner_id: str
    first_name: str
    last_name: str
    contact_number: str | None
    email: str | None

    model_config = ConfigDict(from_attributes=True)


class CaretakerCreate(BaseModel):
    caretaker_id: str = Field(min_length=1, max_length=20)
    owner_id: str
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    contact_number: str | None = None
    email: EmailStr | None = None


class CaretakerRead(BaseModel):
    caretaker_id: str
    owner_id: str
    first_name: str
    last_name: str
    contact_number: str | None
    email: str | None

    model_config = ConfigDict(from_attributes=True)


class EmployeeCreate(BaseModel):
    employee_id: str = Field(min_length=1, max_length=20)
    caretaker_id: str
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    position: str | None = None
    contact_number: str | None = None


class EmployeeRead(BaseModel):
    employee_id: str
    caretaker_id: str
    first_name: str
    last_name: str
    position: str | None
    contact_number: str | None

    model_config = ConfigDict(from_attributes=True)
