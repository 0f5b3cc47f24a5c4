from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_session
from app.services.booking_repository import BookingRepository, SqlBookingRepository


def get_booking_repository(session: AsyncSession = Depends(get_session)) -> BookingRepository:
    """Request-scoped read access for the timeslot calculation; override in tests."""
    return SqlBookingRepository(session)
