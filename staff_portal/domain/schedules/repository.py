"""Schedule repository - Database operations for staff schedules"""

from datetime import time
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from ...models import Schedule, Store, User, Weekday


class ScheduleRepository:
    """Repository for schedule database operations.

    Writes are flushed, never committed: the service owns the transaction.
    """

    @staticmethod
    def find_for_day(db: Session, user_id: int, day: Weekday) -> Optional[Schedule]:
        return (
            db.query(Schedule)
            .filter(Schedule.user_id == user_id, Schedule.day == day)
            .first()
        )

    @staticmethod
    def create_schedule(
        db: Session, user_id: int, day: Weekday, start_time: time, end_time: time
    ) -> Schedule:
        schedule = Schedule(
            user_id=user_id,
            day=day,
            start_time=start_time,
            end_time=end_time,
            is_valid=True,
        )
        db.add(schedule)
        db.flush()
        return schedule

    @staticmethod
    def update_schedule(db: Session, schedule: Schedule, start_time: time, end_time: time) -> Schedule:
        schedule.start_time = start_time
        schedule.end_time = end_time
        schedule.is_valid = True
        schedule.updated_at = func.now()
        db.flush()
        return schedule

    @staticmethod
    def mark_invalid(db: Session, schedule: Schedule) -> Schedule:
        schedule.is_valid = False
        schedule.updated_at = func.now()
        db.flush()
        return schedule

    @staticmethod
    def list_for_staff(db: Session, user_id: int) -> list[tuple[Schedule, Store]]:
        """Schedules of a staff member with their store, in insertion order"""
        return (
            db.query(Schedule, Store)
            .join(User, Schedule.user_id == User.id)
            .join(Store, User.store_id == Store.id)
            .filter(Schedule.user_id == user_id)
            .order_by(Schedule.id.asc())
            .all()
        )
