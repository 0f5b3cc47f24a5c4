from collections.abc import Collection
from dataclasses import dataclass
from datetime import date, time
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.appointment import CANCELLED_STATUS, Appointment
from app.models.availability import Availability
from app.models.service import Service


@dataclass(frozen=True)
class BookedAppointment:
    id: int | None
    appointment_time: time
    service_ids: list[str]


class BookingRepository(Protocol):
    """Read-only data the timeslot calculation depends on."""

    async def list_weekly_availability(self) -> list[Availability]: ...

    async def get_service_durations(self, service_ids: Collection[str]) -> dict[str, int]: ...

    async def list_booked_appointments(self, d: date) -> list[BookedAppointment]: ...


class SqlBookingRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_weekly_availability(self) -> list[Availability]:
        result = await self.session.execute(select(Availability).order_by(Availability.day_of_week))
        return list(result.scalars().all())

    async def get_service_durations(self, service_ids: Collection[str]) -> dict[str, int]:
        if not service_ids:
            return {}
        result = await self.session.execute(
            select(Service.id, Service.duration_min).where(Service.id.in_(list(service_ids)))
        )
        return {row[0]: row[1] for row in result.all()}

    async def list_booked_appointments(self, d: date) -> list[BookedAppointment]:
        result = await self.session.execute(
            select(Appointment.id, Appointment.appointment_time, Appointment.service_ids)
            .where(
                Appointment.appointment_date == d,
                Appointment.status != CANCELLED_STATUS,
            )
            .order_by(Appointment.appointment_time)
        )
        return [
            BookedAppointment(id=row[0], appointment_time=row[1], service_ids=list(row[2] or []))
            for row in result.all()
        ]
