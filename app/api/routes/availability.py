from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.schemas.availability import AvailabilityUpdateRequest
from app.core.db import get_session
from app.models.availability import AvailabilityBase, AvailabilityPublic
from app.services.availability_service import list_week, save_week

router = APIRouter(prefix="/availability", tags=["availability"])


@router.get("", response_model=list[AvailabilityPublic])
async def get_weekly_availability(
    session: AsyncSession = Depends(get_session),
) -> list[AvailabilityPublic]:
    """Opening hours Sunday..Saturday; days never saved show the configured defaults."""
    return await list_week(session)


@router.put("", response_model=list[AvailabilityPublic])
async def update_weekly_availability(
    body: AvailabilityUpdateRequest,
    session: AsyncSession = Depends(get_session),
) -> list[AvailabilityPublic]:
    entries = [AvailabilityBase(**d.model_dump()) for d in body.days]
    return await save_week(session, entries)
