"""Booking router - appointments assigned to the current staff member"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_staff
from ...database import get_db
from ...models import User
from ...responses import message, response_success
from .service import BookingService

router = APIRouter(prefix="/staff", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


@router.get("/bookings")
async def get_employee_bookings(
    current_staff: User = Depends(get_current_staff),
    service: BookingService = Depends(get_booking_service),
):
    """List bookings of the current staff member with store details"""
    return response_success(message("booking.show"), service.list_bookings(current_staff.id))
