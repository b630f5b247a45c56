"""Corporation sheet schemas."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from eveapi.schemas.base import BaseSchema


class AllianceSummary(BaseSchema):
    alliance_id: int
    name: str


class EntityName(BaseSchema):
    entity_id: int
    category: str
    name: str


class CorporationSheet(BaseSchema):
    """Corporation sheet."""
    corporation_id: int
    name: str = Field(description="The name of the corporation")
    ticker: str = Field(description="The corporation ticker name")
    member_count: int = Field(description="The member amount of the corporation")
    ceo_id: int = Field(description="The character ID of the corporation CEO")
    alliance_id: Optional[int] = Field(default=None, description="The alliance ID of the corporation if any")
    description: Optional[str] = Field(default=None, description="The corporation description")
    tax_rate: float = Field(description="The corporation tax rate")
    date_founded: Optional[datetime] = Field(default=None, description="The corporation creation date")
    creator_id: int = Field(description="The corporation founder character ID")
    url: Optional[str] = Field(default=None, description="The corporation homepage link")
    faction_id: Optional[int] = Field(default=None, description="The corporation faction if any")
    home_station_id: Optional[int] = Field(
        default=None, description="The home station where the corporation has its HQ"
    )
    shares: Optional[float] = Field(default=None, description="The shares attached to the corporation")

    # Resolved relations, placeholders when unknown
    alliance: AllianceSummary
    ceo: EntityName
    member_limit: int


class CorporationPurgeResponse(BaseSchema):
    """Response after purging a corporation."""
    corporation_id: int
    deleted: dict[str, int]
    total_deleted: int


class CorporationRelatedCounts(BaseSchema):
    corporation_id: int
    counts: dict[str, int]
