import logging
from collections.abc import Iterable
from datetime import time

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.availability import Availability, AvailabilityBase, AvailabilityPublic

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7


def default_availability(day: int) -> AvailabilityPublic:
    return AvailabilityPublic(
        day_of_week=day,
        start_time=time.fromisoformat(settings.default_opening_time),
        end_time=time.fromisoformat(settings.default_closing_time),
        is_active=day in settings.default_open_weekdays_set,
        stored=False,
    )


def build_week(records: Iterable[Availability]) -> list[AvailabilityPublic]:
    """Sunday..Saturday, falling back to the configured defaults for unsaved days."""
    by_day = {r.day_of_week: r for r in records}
    week: list[AvailabilityPublic] = []
    for day in range(DAYS_IN_WEEK):
        record = by_day.get(day)
        if record is None:
            week.append(default_availability(day))
            continue
        week.append(
            AvailabilityPublic(
                day_of_week=day,
                start_time=record.start_time,
                end_time=record.end_time,
                is_active=record.is_active,
            )
        )
    return week


async def list_week(session: AsyncSession) -> list[AvailabilityPublic]:
    result = await session.execute(select(Availability))
    return build_week(result.scalars().all())


async def save_week(session: AsyncSession, entries: list[AvailabilityBase]) -> list[AvailabilityPublic]:
    """Insert or update one row per weekday given; other weekdays are left alone."""
    result = await session.execute(
        select(Availability).where(Availability.day_of_week.in_([e.day_of_week for e in entries]))
    )
    existing = {r.day_of_week: r for r in result.scalars().all()}
    for entry in entries:
        row = existing.get(entry.day_of_week)
        if row is None:
            row = Availability(**entry.model_dump())
        else:
            row.start_time = entry.start_time
            row.end_time = entry.end_time
            row.is_active = entry.is_active
        session.add(row)
    await session.flush()
    logger.info("Saved availability for weekday(s) %s", sorted(e.day_of_week for e in entries))
    return await list_week(session)
