"""Schema exports."""

from boardinghouse.schemas.boarder import (
    BoarderCreate,
    BoarderRead,
    BoarderRemovalRead,
    BoarderUpdate,
    GuardianCreate,
    GuardianRead,
    RoomAssignment,
)
from boardinghouse.schemas.booking import BookingCreate, BookingRead, BookingStatusUpdate
from boardinghouse.schemas.ledger import (
    BalanceRead,
    BalanceStatementRead,
    ChargeCreate,
    ChargeRead,
    PaymentCreate,
    PaymentRead,
)
from boardinghouse.schemas.reporting import BoarderRoomEntry, IncomeReport
from boardinghouse.schemas.room import RoomCreate, RoomRead, RoomRentUpdate
from boardinghouse.schemas.staff import (
    CaretakerCreate,
    CaretakerRead,
    EmployeeCreate,
    EmployeeRead,
    OwnerCreate,
    OwnerRead,
)

__all__ = [
    "BalanceRead",
    "BalanceStatementRead",
    "BoarderCreate",
    "BoarderRead",
    "BoarderRemovalRead",
    "BoarderRoomEntry",
    "BoarderUpdate",
    "BookingCreate",
    "BookingRead",
    "BookingStatusUpdate",
    "CaretakerCreate",
    "CaretakerRead",
    "ChargeCreate",
    "ChargeRead",
    "EmployeeCreate",
    "EmployeeRead",
    "GuardianCreate",
    "GuardianRead",
    "IncomeReport",
    "OwnerCreate",
    "OwnerRead",
    "PaymentCreate",
    "PaymentRead",
    "RoomAssignment",
    "RoomCreate",
    "RoomRead",
    "RoomRentUpdate",
]
