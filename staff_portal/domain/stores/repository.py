"""Store repository - Database operations for stores and opening hours"""

from datetime import time
from typing import Optional

from sqlalchemy.orm import Session

from ...models import OpeningHour, Store, Weekday


class StoreRepository:
    """Repository for store and opening hour database operations"""

    @staticmethod
    def get_store(db: Session, store_id: int) -> Optional[Store]:
        return db.query(Store).filter(Store.id == store_id).first()

    @staticmethod
    def create_store(db: Session, name: str, address: Optional[str] = None) -> Store:
        """Create a store (caller commits)"""
        store = Store(name=name, address=address)
        db.add(store)
        db.flush()
        return store

    @staticmethod
    def get_opening_hour(db: Session, store_id: int, day: Weekday) -> Optional[OpeningHour]:
        """Get the opening window of a store for one weekday"""
        return (
            db.query(OpeningHour)
            .filter(OpeningHour.store_id == store_id, OpeningHour.day == day)
            .first()
        )

    @staticmethod
    def get_opening_hours(db: Session, store_id: int) -> list[OpeningHour]:
        """Get all opening windows of a store, Monday first"""
        hours = db.query(OpeningHour).filter(OpeningHour.store_id == store_id).all()
        return sorted(hours, key=lambda h: h.day.ordinal)

    @staticmethod
    def set_opening_hour(
        db: Session, store_id: int, day: Weekday, opening_time: time, closing_time: time
    ) -> OpeningHour:
        """Insert or replace the opening window for (store, day) (caller commits)"""
        hour = StoreRepository.get_opening_hour(db, store_id, day)
        if hour is None:
            hour = OpeningHour(store_id=store_id, day=day)
            db.add(hour)
        hour.opening_time = opening_time
        hour.closing_time = closing_time
        db.flush()
        return hour
