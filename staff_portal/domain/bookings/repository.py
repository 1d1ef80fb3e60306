"""Booking repository - Database operations for bookings"""

from sqlalchemy.orm import Session

from ...models import Booking, Store, User


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def list_for_staff(db: Session, user_id: int) -> list[tuple[Booking, Store]]:
        """Bookings assigned to a staff member with the staff member's store"""
        return (
            db.query(Booking, Store)
            .join(User, Booking.user_id == User.id)
            .join(Store, User.store_id == Store.id)
            .filter(Booking.user_id == user_id)
            .order_by(Booking.day.asc(), Booking.time.asc())
            .all()
        )
