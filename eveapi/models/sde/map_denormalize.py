"""Static data export: denormalized celestial map.

Column names follow the export (``itemID``, ``solarSystemID``, ...); the
mapped attributes use snake_case.
"""
from sqlalchemy import Column, Float, Integer, String

from eveapi.database import Base


class MapDenormalize(Base):
    """Every celestial (sun, planet, moon, belt, stargate, station)."""

    __tablename__ = "mapDenormalize"

    item_id = Column("itemID", Integer, primary_key=True, autoincrement=False)
    type_id = Column("typeID", Integer, nullable=True)
    group_id = Column("groupID", Integer, nullable=True)
    solar_system_id = Column("solarSystemID", Integer, nullable=True, index=True)
    constellation_id = Column("constellationID", Integer, nullable=True)
    region_id = Column("regionID", Integer, nullable=True)
    orbit_id = Column("orbitID", Integer, nullable=True)
    x = Column(Float, nullable=True)
    y = Column(Float, nullable=True)
    z = Column(Float, nullable=True)
    radius = Column(Float, nullable=True)
    item_name = Column("itemName", String(100), nullable=True)
    security = Column(Float, nullable=True)
    celestial_index = Column("celestialIndex", Integer, nullable=True)
    orbit_index = Column("orbitIndex", Integer, nullable=True)

    def __repr__(self):
        return f"<MapDenormalize(item_id={self.item_id}, item_name={self.item_name})>"
