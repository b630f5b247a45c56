"""Industry schemas."""
from datetime import datetime

from eveapi.schemas.base import BaseSchema


class MiningExtractionResponse(BaseSchema):
    """Moon extraction with its derived timers."""
    corporation_id: int
    structure_id: int
    moon_id: int
    extraction_start_time: datetime
    chunk_arrival_time: datetime
    natural_decay_time: datetime
    expires_at: datetime
    is_ready: bool
    is_expired: bool


class MiningExtractionCreate(BaseSchema):
    """Request to record the extraction running from a refinery."""
    structure_id: int
    moon_id: int
    extraction_start_time: datetime
    chunk_arrival_time: datetime
    natural_decay_time: datetime
