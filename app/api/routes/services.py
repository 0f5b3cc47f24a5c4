from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_session
from app.models.service import ServicePublic
from app.services.catalog_service import list_active_services

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=list[ServicePublic])
async def list_services(session: AsyncSession = Depends(get_session)) -> list[ServicePublic]:
    services = await list_active_services(session)
    return [ServicePublic(id=s.id, name=s.name, duration_min=s.duration_min) for s in services]
