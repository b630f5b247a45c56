"""Sovereignty API router."""
from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from eveapi.database import get_db
from eveapi.schemas.sovereignty import SovereigntySystem
from eveapi.services import SovereigntyService

router = APIRouter()


@router.get("/alliances/{alliance_id}", response_model=list[SovereigntySystem])
async def get_alliance_systems(
    alliance_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db),
):
    """List the solar systems held by an alliance."""
    systems = await SovereigntyService(db).systems_for_alliance(alliance_id)
    return [SovereigntySystem.model_validate(system) for system in systems]
