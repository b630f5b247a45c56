"""Sovereignty map lookups."""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eveapi.models import MapSovereignty


class SovereigntyService:
    """Read access to the sovereignty map."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def systems_for_alliance(self, alliance_id: int) -> list[MapSovereignty]:
        """Return the systems held by an alliance, ordered by name."""
        stmt = (
            select(MapSovereignty)
            .where(MapSovereignty.alliance_id == alliance_id)
            .order_by(MapSovereignty.solar_system_name)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_system_by_name(self, name: str) -> Optional[MapSovereignty]:
        result = await self.db.execute(
            select(MapSovereignty).where(MapSovereignty.solar_system_name == name)
        )
        return result.scalar_one_or_none()
