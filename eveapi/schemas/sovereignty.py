"""Sovereignty schemas."""
from eveapi.schemas.base import BaseSchema


class SovereigntySystem(BaseSchema):
    solar_system_id: int
    solar_system_name: str
    alliance_id: int
    corporation_id: int
    faction_id: int
