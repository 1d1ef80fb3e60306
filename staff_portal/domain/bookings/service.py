"""Booking service - appointments of a staff member"""

from sqlalchemy.orm import Session

from ...exceptions import NotFound
from ...models import Booking, Store
from ...responses import format_time, message
from .repository import BookingRepository


def serialize_booking(booking: Booking, store: Store) -> dict:
    return {
        "id": booking.id,
        "day": booking.day,
        "time": format_time(booking.time),
        "status": booking.status.value,
        "store_name": store.name,
        "store_address": store.address,
    }


class BookingService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()

    def list_bookings(self, staff_id: int) -> list[dict]:
        rows = self.repo.list_for_staff(self.db, staff_id)
        if not rows:
            raise NotFound(message("booking.not_found"))
        return [serialize_booking(booking, store) for booking, store in rows]
