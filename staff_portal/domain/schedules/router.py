"""Schedule router - FastAPI endpoints for the staff member's weekly schedule"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_staff
from ...database import get_db
from ...models import User
from ...responses import format_time, message, response_created, response_success
from .schemas import ScheduleSubmission
from .service import SchedulingService

router = APIRouter(prefix="/staff", tags=["Schedules"])


def get_scheduling_service(db: Session = Depends(get_db)) -> SchedulingService:
    """Dependency injection for SchedulingService"""
    return SchedulingService(db)


@router.post("/schedule", status_code=201)
async def create_schedule(
    data: ScheduleSubmission,
    current_staff: User = Depends(get_current_staff),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Register or update the current staff member's weekly schedule"""
    service.submit_schedule(current_staff.id, current_staff.store_id, data.schedules)
    submitted = [
        {
            "day": entry.day.value,
            "start_time": format_time(entry.start_time),
            "end_time": format_time(entry.end_time),
        }
        for entry in data.schedules
    ]
    return response_created(message("staff.register_success"), submitted)


@router.get("/schedule")
async def see_schedule(
    current_staff: User = Depends(get_current_staff),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """List the current staff member's schedules with validity warnings"""
    return response_success(message("staff.show_schedule"), service.list_schedules(current_staff.id))
