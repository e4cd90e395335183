"""Domain errors raised by the consistency services."""

from __future__ import annotations

from decimal import Decimal


class BoardingError(RuntimeError):
    """Base class for failures surfaced by the service layer."""


class NotFoundError(BoardingError, LookupError):
    """Raised when a referenced boarder, room or ledger entry is absent."""

    def __init__(self, entity: str, identifier: object) -> None:
        super().__init__(f"{entity} {identifier} not found")
        self.entity = entity
        self.identifier = identifier


class InvalidAmountError(BoardingError, ValueError):
    """Raised for non-positive monetary amounts."""

    def __init__(self, amount: Decimal) -> None:
        super().__init__(f"Amount must be positive, got {amount}")
        self.amount = amount


class InsufficientBalanceError(BoardingError):
    """Raised when a charge would overdraw a boarder's deposit balance."""

    def __init__(self, boarder_id: str, balance: Decimal, requested: Decimal) -> None:
        super().__init__(
            f"Insufficient balance for boarder {boarder_id}: "
            f"balance {balance}, charge {requested}"
        )
        self.boarder_id = boarder_id
        self.balance = balance
        self.requested = requested


class StorageError(BoardingError):
    """Raised when the underlying transaction fails and is rolled back."""


class DuplicateRecordError(StorageError):
    """Raised when an insert or update violates a uniqueness constraint."""


class ConcurrencyConflictError(BoardingError):
    """Raised when a balance update keeps colliding after every retry."""


__all__ = [
    "BoardingError",
    "ConcurrencyConflictError",
    "DuplicateRecordError",
    "InsufficientBalanceError",
    "InvalidAmountError",
    "NotFoundError",
    "StorageError",
]
