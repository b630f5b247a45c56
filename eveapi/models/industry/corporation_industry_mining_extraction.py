"""Moon-drilling extractions run from corporation refineries."""
from datetime import datetime, timedelta, UTC

from sqlalchemy import BigInteger, Column, DateTime, Integer

from eveapi.database import Base
from eveapi.models.base import TimestampMixin, belongs_to
from eveapi.utils.datetime_helpers import ensure_utc


class CorporationIndustryMiningExtraction(TimestampMixin, Base):
    """A moon chunk being drilled, one per refinery."""

    # Seconds a chunk remains minable once it has arrived
    THEORETICAL_DEPLETION_COUNTDOWN = 172800

    # Shortest drilling cycle accepted by the game: 6 days and 3 minutes
    MINIMUM_DRILLING_DURATION = 518580

    # Longest drilling cycle accepted by the game: 55 days, 23 hours and 24 minutes
    MAXIMUM_DRILLING_DURATION = 4836240

    __tablename__ = "corporation_industry_mining_extractions"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    structure_id = Column(BigInteger, primary_key=True, autoincrement=False)
    moon_id = Column(Integer, nullable=False, index=True)
    extraction_start_time = Column(DateTime(timezone=True), nullable=False)
    chunk_arrival_time = Column(DateTime(timezone=True), nullable=False, index=True)
    natural_decay_time = Column(DateTime(timezone=True), nullable=False)

    moon = belongs_to("CorporationIndustryMiningExtraction", "MapDenormalize", "moon_id", "item_id")
    structure = belongs_to(
        "CorporationIndustryMiningExtraction", "CorporationStructure", "structure_id", "structure_id"
    )

    @property
    def expires_at(self) -> datetime:
        """Return the moment the chunk is theoretically depleted."""
        return ensure_utc(self.chunk_arrival_time) + timedelta(
            seconds=self.THEORETICAL_DEPLETION_COUNTDOWN
        )

    @property
    def drilling_duration(self) -> timedelta:
        return ensure_utc(self.chunk_arrival_time) - ensure_utc(self.extraction_start_time)

    def has_valid_drilling_duration(self) -> bool:
        """Return True if the drilling cycle fits the bounds the game allows."""
        seconds = self.drilling_duration.total_seconds()
        return self.MINIMUM_DRILLING_DURATION <= seconds <= self.MAXIMUM_DRILLING_DURATION

    def is_ready(self, now: datetime | None = None) -> bool:
        """Return True once the chunk has arrived and can be fractured."""
        current_time = ensure_utc(now) if now else datetime.now(UTC)
        return current_time >= ensure_utc(self.chunk_arrival_time)

    def is_expired(self, now: datetime | None = None) -> bool:
        current_time = ensure_utc(now) if now else datetime.now(UTC)
        return current_time >= self.expires_at

    def __repr__(self):
        return (f"<CorporationIndustryMiningExtraction(structure_id={self.structure_id}, "
                f"moon_id={self.moon_id}, chunk_arrival_time={self.chunk_arrival_time})>")
