"""Solar system sovereignty."""
from sqlalchemy import Column, Index, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin, belongs_to


class MapSovereignty(TimestampMixin, Base):
    """Which alliance, corporation and faction hold a solar system."""

    __tablename__ = "map_sovereignties"

    solar_system_id = Column("solarSystemID", Integer, primary_key=True, autoincrement=False)
    alliance_id = Column("allianceID", Integer, nullable=False)
    faction_id = Column("factionID", Integer, nullable=False)
    solar_system_name = Column("solarSystemName", String(255), nullable=False)
    corporation_id = Column("corporationID", Integer, nullable=False)

    alliance = belongs_to("MapSovereignty", "Alliance", "alliance_id", "alliance_id")

    __table_args__ = (
        Index("map_sovereignties_allianceid_index", alliance_id),
        Index("map_sovereignties_solarsystemname_index", solar_system_name),
    )

    def __repr__(self):
        return (f"<MapSovereignty(solar_system_id={self.solar_system_id}, "
                f"solar_system_name={self.solar_system_name}, alliance_id={self.alliance_id})>")
