from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.service import Service


async def list_active_services(session: AsyncSession) -> list[Service]:
    result = await session.execute(
        select(Service).where(Service.is_active == True).order_by(Service.name)  # noqa: E712
    )
    return list(result.scalars().all())
