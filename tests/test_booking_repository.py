import asyncio
from datetime import datetime, time, timedelta

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from app.models.appointment import Appointment
from app.models.availability import Availability
from app.models.service import Service
from app.services.booking_repository import SqlBookingRepository
from app.services.slot_service import Ok, TimeInterval, TimeSlot, TimeslotQuery, build_booked_intervals, find_timeslots

from tests.conftest import MONDAY

TUESDAY = MONDAY + timedelta(days=1)


async def _seed(session: AsyncSession) -> None:
    session.add(Availability(day_of_week=1, start_time=time(9, 0), end_time=time(12, 0), is_active=True))
    session.add(Service(id="a", name="Massage", duration_min=60))
    session.add(Service(id="b", name="Haircut", duration_min=30))
    await session.flush()
    rows = [
        (MONDAY, time(10, 0), ["a"], "confirmed"),
        (MONDAY, time(9, 0), ["a"], "cancelled"),
        (TUESDAY, time(11, 0), ["b"], "pending"),
    ]
    for d, at, service_ids, status in rows:
        await session.execute(
            insert(Appointment.__table__).values(
                appointment_date=d,
                appointment_time=at,
                service_ids=service_ids,
                status=status,
                created_at=datetime(2024, 5, 1, 12, 0),
            )
        )
    await session.commit()


def _with_repository(check):
    async def _run():
        engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
            async with maker() as session:
                await _seed(session)
                return await check(SqlBookingRepository(session))
        finally:
            await engine.dispose()

    return asyncio.run(_run())


def test_only_live_bookings_on_the_day_are_returned():
    async def check(repo):
        booked = await repo.list_booked_appointments(MONDAY)
        return booked, await repo.get_service_durations({"a", "b", "gone"})

    booked, durations = _with_repository(check)
    assert [(b.appointment_time, b.service_ids) for b in booked] == [(time(10, 0), ["a"])]
    assert durations == {"a": 60, "b": 30}
    assert build_booked_intervals(booked, durations) == [TimeInterval(600, 660)]


def test_slots_from_database_rows():
    async def check(repo):
        return await find_timeslots(repo, TimeslotQuery(MONDAY, ["b"]))

    assert _with_repository(check) == Ok(
        [
            TimeSlot("09:00", True),
            TimeSlot("09:30", True),
            TimeSlot("10:00", False),
            TimeSlot("10:30", False),
            TimeSlot("11:00", True),
            TimeSlot("11:30", True),
        ]
    )


def test_empty_service_lookup_skips_query():
    async def check(repo):
        return await repo.get_service_durations([])

    assert _with_repository(check) == {}
