"""Moon-mining extraction queries."""
import logging
from datetime import datetime, timedelta, UTC
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eveapi.models import CorporationIndustryMiningExtraction
from eveapi.utils.datetime_helpers import ensure_utc

logger = logging.getLogger(__name__)

Extraction = CorporationIndustryMiningExtraction


class ExtractionServiceError(RuntimeError):
    """Raised when an extraction operation fails."""


class InvalidDrillingDurationError(ExtractionServiceError):
    """Raised when a drilling cycle falls outside the bounds the game allows."""

    def __init__(self, duration: timedelta):
        super().__init__(
            f"Drilling duration of {int(duration.total_seconds())}s is outside the allowed range "
            f"[{Extraction.MINIMUM_DRILLING_DURATION}s, {Extraction.MAXIMUM_DRILLING_DURATION}s]"
        )
        self.duration = duration


class MiningExtractionService:
    """Service for moon-drilling extraction schedules."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _now(now: Optional[datetime]) -> datetime:
        return ensure_utc(now) if now else datetime.now(UTC)

    def _scoped(self, stmt, corporation_id: Optional[int]):
        if corporation_id is not None:
            stmt = stmt.where(Extraction.corporation_id == corporation_id)
        return stmt

    async def list_extractions(self, corporation_id: int) -> list[Extraction]:
        """Return every extraction for a corporation, soonest chunk first."""
        stmt = (
            select(Extraction)
            .where(Extraction.corporation_id == corporation_id)
            .order_by(Extraction.chunk_arrival_time)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def ready_extractions(
        self,
        corporation_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> list[Extraction]:
        """
        Return chunks that have arrived and are not depleted yet.

        Args:
            corporation_id: Restrict to one corporation (all when None)
            now: Reference time (defaults to the current UTC time)
        """
        current_time = self._now(now)
        depletion_cutoff = current_time - timedelta(seconds=Extraction.THEORETICAL_DEPLETION_COUNTDOWN)

        stmt = self._scoped(
            select(Extraction).where(
                Extraction.chunk_arrival_time <= current_time,
                Extraction.chunk_arrival_time > depletion_cutoff,
            ),
            corporation_id,
        ).order_by(Extraction.chunk_arrival_time)
        result = await self.db.execute(stmt)

        # Re-check in Python: SQLite compares naive text timestamps
        return [
            extraction for extraction in result.scalars().all()
            if extraction.is_ready(current_time) and not extraction.is_expired(current_time)
        ]

    async def upcoming_extractions(
        self,
        corporation_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> list[Extraction]:
        """Return extractions whose chunk has not arrived yet, soonest first."""
        current_time = self._now(now)
        stmt = self._scoped(
            select(Extraction).where(Extraction.chunk_arrival_time > current_time),
            corporation_id,
        ).order_by(Extraction.chunk_arrival_time)
        result = await self.db.execute(stmt)
        return [extraction for extraction in result.scalars().all() if not extraction.is_ready(current_time)]

    async def record_extraction(
        self,
        corporation_id: int,
        structure_id: int,
        moon_id: int,
        extraction_start_time: datetime,
        chunk_arrival_time: datetime,
        natural_decay_time: datetime,
    ) -> Extraction:
        """
        Insert or update the extraction running from a refinery.

        Raises:
            InvalidDrillingDurationError: If the drilling cycle is shorter or
                longer than the game allows
        """
        extraction = Extraction(
            corporation_id=corporation_id,
            structure_id=structure_id,
            moon_id=moon_id,
            extraction_start_time=ensure_utc(extraction_start_time),
            chunk_arrival_time=ensure_utc(chunk_arrival_time),
            natural_decay_time=ensure_utc(natural_decay_time),
        )

        if not extraction.has_valid_drilling_duration():
            logger.warning(
                f"Rejected extraction for structure {structure_id}: "
                f"drilling duration {extraction.drilling_duration}"
            )
            raise InvalidDrillingDurationError(extraction.drilling_duration)

        extraction = await self.db.merge(extraction)
        await self.db.commit()

        logger.info(
            f"Recorded extraction for structure {structure_id} "
            f"(moon {moon_id}, arrival {extraction.chunk_arrival_time})"
        )
        return extraction
