from datetime import time

from pydantic import BaseModel, Field, model_validator


class AvailabilityEntry(BaseModel):
    day_of_week: int = Field(ge=0, le=6)  # 0 = Sunday
    start_time: time
    end_time: time
    is_active: bool = True

    @model_validator(mode="after")
    def _window_is_ordered(self) -> "AvailabilityEntry":
        if self.is_active and self.start_time >= self.end_time:
            raise ValueError(f"start_time must be before end_time for day {self.day_of_week}")
        return self


class AvailabilityUpdateRequest(BaseModel):
    days: list[AvailabilityEntry] = Field(min_length=1, max_length=7)

    @model_validator(mode="after")
    def _unique_days(self) -> "AvailabilityUpdateRequest":
        seen = [d.day_of_week for d in self.days]
        if len(seen) != len(set(seen)):
            raise ValueError("each day_of_week may appear only once")
        return self
