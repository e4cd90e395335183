"""Service layer exports."""
from boardinghouse.services import (
    boarder_locks,
    boarder_service,
    booking_service,
    ledger_service,
    occupancy_service,
    reporting_service,
    room_service,
    staff_service,
    statement_service,
)

__all__ = [
    "boarder_locks",
    "boarder_service",
    "booking_service",
    "ledger_service",
    "occupancy_service",
    "reporting_service",
    "room_service",
    "staff_service",
    "statement_service",
]
