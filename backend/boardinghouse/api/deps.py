"""Common API dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from boardinghouse.core.errors import (
    BoardingError,
    ConcurrencyConflictError,
    DuplicateRecordError,
    InsufficientBalanceError,
    NotFoundError,
    StorageError,
)
from boardinghouse.db.session import get_session


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


def http_error(exc: BoardingError | ValueError) -> HTTPException:
    """Translate a service-layer failure into the matching HTTP error."""
    if isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(
        exc, (InsufficientBalanceError, ConcurrencyConflictError, DuplicateRecordError)
    ):
        code = status.HTTP_409_CONFLICT
    elif isinstance(exc, StorageError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(exc))
