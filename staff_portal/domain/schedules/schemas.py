"""Schedule domain schemas - Pydantic models for validation"""

from datetime import time

from pydantic import BaseModel, Field, field_validator, model_validator

from ...models import Weekday
from ...shared.validators import parse_time_of_day


class ScheduleEntry(BaseModel):
    """One proposed working window"""

    day: Weekday
    start_time: time
    end_time: time

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_time(cls, v):
        return parse_time_of_day(v)

    @model_validator(mode="after")
    def check_order(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be later than start_time")
        return self


class ScheduleSubmission(BaseModel):
    """Schema for submitting a weekly schedule"""

    schedules: list[ScheduleEntry] = Field(..., min_length=1, max_length=7)
