from datetime import time

from sqlmodel import Field, SQLModel


class AvailabilityBase(SQLModel):
    day_of_week: int = Field(ge=0, le=6)  # 0 = Sunday ... 6 = Saturday
    start_time: time
    end_time: time
    is_active: bool = True


class Availability(AvailabilityBase, table=True):
    __tablename__ = "availability"
    id: int | None = Field(default=None, primary_key=True)
    day_of_week: int = Field(ge=0, le=6, unique=True, index=True)


class AvailabilityPublic(AvailabilityBase):
    stored: bool = True  # False when the row is a configured default, not yet saved
