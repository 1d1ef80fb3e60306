"""Scheduling service - validates weekly schedules against store opening hours"""

import logging

from sqlalchemy.orm import Session

from ...exceptions import (
    NotFound,
    OpeningHoursNotFound,
    OutsideOpeningHours,
    StaffPortalError,
    UnexpectedFailure,
    ValidationFailure,
)
from ...models import Schedule, Store, Weekday
from ...responses import format_time, message
from ...shared.validators import parse_time_of_day
from ..stores.repository import StoreRepository
from .repository import ScheduleRepository
from .schemas import ScheduleEntry

logger = logging.getLogger(__name__)


def serialize_schedule(schedule: Schedule, store: Store) -> dict:
    """Schedule with store info; ``error`` is set only for invalid schedules"""
    return {
        "id": schedule.id,
        "user_id": schedule.user_id,
        "store_name": store.name,
        "store_address": store.address,
        "day": schedule.day.value,
        "start_time": format_time(schedule.start_time),
        "end_time": format_time(schedule.end_time),
        "is_valid": bool(schedule.is_valid),
        "created_at": schedule.created_at,
        "error": None if schedule.is_valid else message("staff.error_check"),
    }


class SchedulingService:
    """Service layer for staff schedules"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ScheduleRepository()
        self.store_repo = StoreRepository()

    def submit_schedule(self, staff_id: int, store_id: int, entries: list[ScheduleEntry]) -> list[Schedule]:
        """
        Validate and upsert a batch of schedule entries for one staff member.

        Entries are checked in submission order against the store's opening
        hours. The batch is committed only if every entry passes; the first
        failing entry rolls back everything written for the earlier ones.
        """
        logger.info(f"📥 Schedule submission: staff={staff_id} store={store_id} entries={len(entries)}")
        saved: list[Schedule] = []

        try:
            for entry in entries:
                day = Weekday(entry.day)
                start_time = parse_time_of_day(entry.start_time)
                end_time = parse_time_of_day(entry.end_time)

                opening_hours = self.store_repo.get_opening_hour(self.db, store_id, day)
                if not opening_hours:
                    raise OpeningHoursNotFound(
                        message("openingHours.not_found"),
                        {"day": day.value},
                    )

                if start_time < opening_hours.opening_time or end_time > opening_hours.closing_time:
                    raise OutsideOpeningHours(
                        message("openingHours.opening_hours_start_in_time"),
                        {
                            "day": day.value,
                            "start_time": start_time,
                            "end_time": end_time,
                            "opening_time": opening_hours.opening_time,
                            "closing_time": opening_hours.closing_time,
                        },
                    )

                existing = self.repo.find_for_day(self.db, staff_id, day)
                if existing:
                    saved.append(self.repo.update_schedule(self.db, existing, start_time, end_time))
                else:
                    saved.append(
                        self.repo.create_schedule(self.db, staff_id, day, start_time, end_time)
                    )

            self.db.commit()
        except StaffPortalError as e:
            self.db.rollback()
            logger.warning(f"⚠️ Schedule submission rejected for staff {staff_id}: {e.code} {e.details}")
            raise
        except ValueError as e:
            self.db.rollback()
            raise ValidationFailure(str(e)) from e
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Schedule submission failed for staff {staff_id}: {e}")
            raise UnexpectedFailure(message("staff.error"), {"detail": str(e)}) from e

        logger.info(f"✅ Schedule saved for staff {staff_id}: {[s.day.value for s in saved]}")
        return saved

    def list_schedules(self, staff_id: int) -> list[dict]:
        """Schedules of a staff member, flagged when marked invalid"""
        rows = self.repo.list_for_staff(self.db, staff_id)
        if not rows:
            raise NotFound(message("staff.not_found_schedule"))

        items = [serialize_schedule(schedule, store) for schedule, store in rows]
        invalid_count = sum(1 for item in items if not item["is_valid"])
        if invalid_count:
            logger.info(f"⚠️ Staff {staff_id} has {invalid_count} schedule(s) needing a check")
        return items

    def invalidate_schedule(self, staff_id: int, day: str) -> Schedule:
        """Mark the staff member's schedule for ``day`` as needing a check"""
        try:
            weekday = Weekday(day)
        except ValueError as e:
            raise ValidationFailure(str(e)) from e

        schedule = self.repo.find_for_day(self.db, staff_id, weekday)
        if not schedule:
            raise NotFound(message("staff.not_found_schedule"), {"day": weekday.value})

        try:
            self.repo.mark_invalid(self.db, schedule)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to invalidate schedule {schedule.id}: {e}")
            raise UnexpectedFailure(str(e)) from e

        logger.info(f"🚩 Schedule {schedule.id} ({weekday.value}) of staff {staff_id} marked invalid")
        return schedule
