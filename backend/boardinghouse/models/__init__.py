"""ORM models package export."""

from boardinghouse.models.boarder import Boarder, Guardian
from boardinghouse.models.booking import Booking, BookingStatus
from boardinghouse.models.ledger import Charge, DepositBalance, Payment
from boardinghouse.models.room import Room, RoomStatus
from boardinghouse.models.staff import Caretaker, Employee, Owner

__all__ = [
    "Boarder",
    "Booking",
    "BookingStatus",
    "Caretaker",
    "Charge",
    "DepositBalance",
    "Employee",
    "Guardian",
    "Owner",
    "Payment",
    "Room",
    "RoomStatus",
]
