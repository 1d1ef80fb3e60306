"""Uniform response envelope and user-facing messages."""

from datetime import date, datetime, time
from enum import Enum
from typing import Any, Optional

from fastapi.responses import JSONResponse

from .exceptions import StaffPortalError

TIME_FORMAT = "%H:%M:%S"

MESSAGES = {
    "auth.failed": "The current password is incorrect.",
    "user.updated": "Profile updated successfully.",
    "user.show": "Profile retrieved successfully.",
    "user.email_taken": "This email is already used by another account.",
    "user.error": "Could not update the profile.",
    "staff.register_success": "Schedule registered successfully.",
    "staff.error": "Could not register the schedule.",
    "staff.error_check": "This schedule needs to be checked again.",
    "staff.not_found_schedule": "No schedule found.",
    "staff.show_schedule": "Schedule retrieved successfully.",
    "staff.schedule_invalidated": "Schedule marked as invalid.",
    "booking.not_found": "No booking found.",
    "booking.show": "Bookings retrieved successfully.",
    "store.not_found": "Store not found.",
    "openingHours.not_found": "Opening hours not found for this store.",
    "openingHours.opening_hours_start_in_time": "Schedule must be within the store opening hours.",
    "openingHours.show": "Opening hours retrieved successfully.",
    "validation.failed": "The given data was invalid.",
}


def message(key: str) -> str:
    return MESSAGES.get(key, key)


def format_time(value: Optional[time]) -> Optional[str]:
    """Serialize a time of day as HH:MM:SS"""
    return value.strftime(TIME_FORMAT) if value is not None else None


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, time):
        return format_time(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def response_success(msg: str, data: Any = None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": msg, "data": _jsonable(data)})


def response_created(msg: str, data: Any = None) -> JSONResponse:
    return response_success(msg, data, status_code=201)


def response_error(exc: StaffPortalError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "error": _jsonable(exc.to_error())},
    )
