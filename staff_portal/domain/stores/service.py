"""Store service - opening hours lookup and maintenance"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...exceptions import NotFound, UnexpectedFailure, ValidationFailure
from ...models import OpeningHour, Store, Weekday
from ...responses import format_time, message
from ...shared.validators import parse_time_of_day
from .repository import StoreRepository

logger = logging.getLogger(__name__)


def serialize_opening_hour(hour: OpeningHour) -> dict:
    return {
        "day": hour.day.value,
        "opening_time": format_time(hour.opening_time),
        "closing_time": format_time(hour.closing_time),
    }


class StoreService:
    """Service layer for store opening hours"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = StoreRepository()

    def get_opening_hours(self, store_id: int) -> dict:
        """Store id/name with its opening hours, Monday first"""
        store = self.repo.get_store(self.db, store_id)
        if not store:
            raise NotFound(message("store.not_found"))

        hours = self.repo.get_opening_hours(self.db, store.id)
        if not hours:
            raise NotFound(message("openingHours.not_found"))

        return {
            "store_id": store.id,
            "store_name": store.name,
            "opening_hours": [serialize_opening_hour(h) for h in hours],
        }

    def create_store(self, name: str, address: Optional[str] = None) -> Store:
        try:
            store = self.repo.create_store(self.db, name, address)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to create store {name!r}: {e}")
            raise UnexpectedFailure(str(e)) from e
        logger.info(f"✅ Store created: id={store.id} name={store.name!r}")
        return store

    def set_opening_hours(self, store_id: int, day: str, opening_time: str, closing_time: str) -> OpeningHour:
        """Set the opening window of one weekday; opening must precede closing"""
        try:
            weekday = Weekday(day)
            opening = parse_time_of_day(opening_time)
            closing = parse_time_of_day(closing_time)
        except ValueError as e:
            raise ValidationFailure(str(e)) from e

        if opening >= closing:
            raise ValidationFailure(
                "Opening time must be earlier than closing time",
                {"day": weekday.value, "opening_time": opening, "closing_time": closing},
            )

        if not self.repo.get_store(self.db, store_id):
            raise NotFound(message("store.not_found"))

        try:
            hour = self.repo.set_opening_hour(self.db, store_id, weekday, opening, closing)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to set opening hours for store {store_id}: {e}")
            raise UnexpectedFailure(str(e)) from e

        logger.info(
            f"🕘 Store {store_id} {weekday.value}: {format_time(opening)}-{format_time(closing)}"
        )
        return hour
