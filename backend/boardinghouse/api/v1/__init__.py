"""Version 1 API routes."""

from fastapi import APIRouter

from . import boarders, bookings, health, ledger, reports, rooms, staff

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(rooms.router, prefix="/rooms", tags=["rooms"])
router.include_router(boarders.router, prefix="/boarders", tags=["boarders"])
router.include_router(ledger.router, prefix="/boarders", tags=["ledger"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
router.include_router(staff.router, tags=["staff"])

__all__ = ["router"]
