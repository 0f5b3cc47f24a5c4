from datetime import UTC, date, datetime, time

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

CANCELLED_STATUS = "cancelled"


def _utc_naive_now() -> datetime:
    """Naive UTC for TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    id: int | None = Field(default=None, primary_key=True)
    appointment_date: date = Field(index=True)
    appointment_time: time
    service_ids: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    status: str = Field(default="pending", index=True)
    created_at: datetime = Field(default_factory=_utc_naive_now)
