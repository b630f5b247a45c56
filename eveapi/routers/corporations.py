"""Corporation API router."""
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from eveapi.database import get_db
from eveapi.models import CorporationInfo, CorporationIndustryMiningExtraction
from eveapi.schemas.corporation import (
    AllianceSummary,
    CorporationPurgeResponse,
    CorporationRelatedCounts,
    CorporationSheet,
    EntityName,
)
from eveapi.schemas.industry import MiningExtractionCreate, MiningExtractionResponse
from eveapi.services import (
    CorporationNotFoundError,
    CorporationService,
    InvalidDrillingDurationError,
    MiningExtractionService,
)

router = APIRouter()


def _build_sheet(corporation: CorporationInfo) -> CorporationSheet:
    alliance = corporation.alliance_or_default
    ceo = corporation.ceo_or_default
    return CorporationSheet(
        corporation_id=corporation.corporation_id,
        name=corporation.name,
        ticker=corporation.ticker,
        member_count=corporation.member_count,
        ceo_id=corporation.ceo_id,
        alliance_id=corporation.alliance_id,
        description=corporation.description,
        tax_rate=corporation.tax_rate,
        date_founded=corporation.date_founded,
        creator_id=corporation.creator_id,
        url=corporation.url,
        faction_id=corporation.faction_id,
        home_station_id=corporation.home_station_id,
        shares=corporation.shares,
        alliance=AllianceSummary(alliance_id=alliance.alliance_id, name=alliance.name),
        ceo=EntityName(entity_id=ceo.entity_id, category=ceo.category, name=ceo.name),
        member_limit=corporation.member_limit_or_default.limit,
    )


def _build_extraction(extraction: CorporationIndustryMiningExtraction) -> MiningExtractionResponse:
    return MiningExtractionResponse(
        corporation_id=extraction.corporation_id,
        structure_id=extraction.structure_id,
        moon_id=extraction.moon_id,
        extraction_start_time=extraction.extraction_start_time,
        chunk_arrival_time=extraction.chunk_arrival_time,
        natural_decay_time=extraction.natural_decay_time,
        expires_at=extraction.expires_at,
        is_ready=extraction.is_ready(),
        is_expired=extraction.is_expired(),
    )


@router.get("/{corporation_id}", response_model=CorporationSheet)
async def get_corporation_sheet(
    corporation_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Return the corporation sheet with its alliance, CEO and member limit."""
    corporation = await CorporationService(db).get_corporation(corporation_id)
    if corporation is None:
        raise HTTPException(status_code=404, detail="Corporation not found")
    return _build_sheet(corporation)


@router.get("/{corporation_id}/related-counts", response_model=CorporationRelatedCounts)
async def get_related_counts(
    corporation_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Count the rows a purge of this corporation would delete."""
    service = CorporationService(db)
    if await service.get_corporation(corporation_id) is None:
        raise HTTPException(status_code=404, detail="Corporation not found")

    counts = await service.count_related(corporation_id)
    return CorporationRelatedCounts(corporation_id=corporation_id, counts=counts)


@router.delete("/{corporation_id}", response_model=CorporationPurgeResponse)
async def delete_corporation(
    corporation_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Delete a corporation and every collection it owns."""
    try:
        deleted = await CorporationService(db).delete_corporation(corporation_id)
    except CorporationNotFoundError:
        raise HTTPException(status_code=404, detail="Corporation not found")

    return CorporationPurgeResponse(
        corporation_id=corporation_id,
        deleted=deleted,
        total_deleted=sum(deleted.values()),
    )


@router.get("/{corporation_id}/extractions", response_model=list[MiningExtractionResponse])
async def list_extractions(
    corporation_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db),
):
    """List moon extractions with their depletion timers."""
    extractions = await MiningExtractionService(db).list_extractions(corporation_id)
    return [_build_extraction(extraction) for extraction in extractions]


@router.post("/{corporation_id}/extractions", response_model=MiningExtractionResponse, status_code=201)
async def record_extraction(
    request: MiningExtractionCreate,
    corporation_id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_db),
):
    """Record or replace the extraction running from a refinery."""
    if await CorporationService(db).get_corporation(corporation_id) is None:
        raise HTTPException(status_code=404, detail="Corporation not found")

    try:
        extraction = await MiningExtractionService(db).record_extraction(
            corporation_id=corporation_id,
            structure_id=request.structure_id,
            moon_id=request.moon_id,
            extraction_start_time=request.extraction_start_time,
            chunk_arrival_time=request.chunk_arrival_time,
            natural_decay_time=request.natural_decay_time,
        )
    except InvalidDrillingDurationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return _build_extraction(extraction)
