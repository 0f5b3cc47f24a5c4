import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, time

from app.models.availability import Availability
from app.services.booking_repository import BookedAppointment, BookingRepository

logger = logging.getLogger(__name__)

SLOT_STEP_MINUTES = 30


@dataclass(frozen=True)
class TimeInterval:
    """Half-open [start_minutes, end_minutes) range measured from midnight."""

    start_minutes: int
    end_minutes: int

    def overlaps(self, other: "TimeInterval") -> bool:
        # Touching endpoints are not an overlap: back-to-back bookings are fine
        return self.start_minutes < other.end_minutes and other.start_minutes < self.end_minutes


@dataclass(frozen=True)
class TimeSlot:
    time: str  # HH:MM
    available: bool


@dataclass(frozen=True)
class TimeslotQuery:
    booking_date: date
    service_ids: list[str]
    service_quantities: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Ok:
    slots: list[TimeSlot]


@dataclass(frozen=True)
class Err:
    reason: str


TimeslotResult = Ok | Err


def parse_booking_date(value: str) -> date:
    """Parse YYYY-MM-DD from its own year/month/day parts.

    The result is a calendar day with no clock or zone attached, so the weekday can
    never shift across midnight the way a UTC timestamp would.
    """
    parts = value.strip().split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid date {value!r}, expected YYYY-MM-DD")
    year, month, day = (int(p) for p in parts)
    return date(year, month, day)


def day_of_week(d: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return d.isoweekday() % 7


def minutes_since_midnight(value: time | str) -> int:
    if isinstance(value, str):
        hours, minutes = value.split(":")[:2]
        return int(hours) * 60 + int(minutes)
    return value.hour * 60 + value.minute


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def find_opening_hours(weekday: int, availability: Iterable[Availability]) -> TimeInterval | None:
    """Opening window for the weekday, or None when the business is closed."""
    for record in availability:
        if record.day_of_week == weekday and record.is_active:
            return TimeInterval(
                minutes_since_midnight(record.start_time),
                minutes_since_midnight(record.end_time),
            )
    return None


def resolve_treatment_duration(
    service_ids: Sequence[str],
    durations: Mapping[str, int],
    quantities: Mapping[str, int] | None = None,
) -> int:
    """Total minutes for the requested services.

    Quantities default to 1. Quantity entries for ids that were not requested are
    ignored, and unknown service ids contribute nothing.
    """
    quantities = quantities or {}
    total = 0
    for service_id in dict.fromkeys(service_ids):
        duration = durations.get(service_id)
        if duration is None:
            logger.warning("Requested service %s not found in catalog; counting 0 minutes", service_id)
            continue
        total += duration * quantities.get(service_id, 1)
    return total


def build_booked_intervals(
    appointments: Iterable[BookedAppointment], durations: Mapping[str, int]
) -> list[TimeInterval]:
    """Occupied interval per appointment, sized by that appointment's own services."""
    intervals: list[TimeInterval] = []
    for apt in appointments:
        missing = [sid for sid in apt.service_ids if sid not in durations]
        if missing:
            logger.warning(
                "Appointment %s at %s references unknown service(s) %s",
                apt.id,
                apt.appointment_time,
                missing,
            )
        occupied = sum(durations[sid] for sid in apt.service_ids if sid in durations)
        if occupied <= 0:
            logger.warning("Appointment %s has no resolvable duration; skipping", apt.id)
            continue
        start = minutes_since_midnight(apt.appointment_time)
        intervals.append(TimeInterval(start, start + occupied))
    return intervals


def generate_slots(
    opening: TimeInterval,
    duration_minutes: int,
    booked: Sequence[TimeInterval],
    step_minutes: int = SLOT_STEP_MINUTES,
) -> list[TimeSlot]:
    """Every candidate start in the window, unavailable ones included."""
    if duration_minutes <= 0:
        return []
    slots: list[TimeSlot] = []
    last_start = opening.end_minutes - duration_minutes
    for start in range(opening.start_minutes, last_start + 1, step_minutes):
        candidate = TimeInterval(start, start + duration_minutes)
        available = not any(candidate.overlaps(b) for b in booked)
        slots.append(TimeSlot(time=format_minutes(start), available=available))
    return slots


async def find_timeslots(repo: BookingRepository, query: TimeslotQuery) -> TimeslotResult:
    """Compute the slot list for one booking request.

    Closed days, an empty selection and treatments longer than the day all come back
    as Ok([]). Only failures while reading data produce Err.
    """
    logger.info(
        "Calculating timeslots for date=%s services=%s quantities=%s",
        query.booking_date,
        query.service_ids,
        query.service_quantities,
    )
    if not query.service_ids:
        return Ok([])
    try:
        weekday = day_of_week(query.booking_date)
        opening = find_opening_hours(weekday, await repo.list_weekly_availability())
        if opening is None:
            logger.info("Closed on %s (day of week %d)", query.booking_date, weekday)
            return Ok([])

        requested = await repo.get_service_durations(query.service_ids)
        duration = resolve_treatment_duration(query.service_ids, requested, query.service_quantities)

        appointments = await repo.list_booked_appointments(query.booking_date)
        booked_ids = {sid for apt in appointments for sid in apt.service_ids}
        booked_durations = await repo.get_service_durations(booked_ids) if booked_ids else {}
        booked = build_booked_intervals(appointments, booked_durations)
    except Exception as e:
        logger.exception("Timeslot lookup failed for %s: %s", query.booking_date, e)
        return Err(f"{type(e).__name__}: {e}")

    slots = generate_slots(opening, duration, booked)
    logger.info(
        "Generated %d timeslot(s) for %s (%d min treatment, %d booked interval(s))",
        len(slots),
        query.booking_date,
        duration,
        len(booked),
    )
    return Ok(slots)
