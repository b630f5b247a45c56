"""NPC station model."""
from sqlalchemy import BigInteger, Column, Float, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class UniverseStation(TimestampMixin, Base):
    __tablename__ = "universe_stations"

    station_id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    type_id = Column(Integer, nullable=True)
    system_id = Column(Integer, nullable=False, index=True)
    owner = Column(BigInteger, nullable=True)
    race_id = Column(Integer, nullable=True)
    x = Column(Float, nullable=True)
    y = Column(Float, nullable=True)
    z = Column(Float, nullable=True)
    reprocessing_efficiency = Column(Float, nullable=True)
    reprocessing_stations_take = Column(Float, nullable=True)
    max_dockable_ship_volume = Column(Float, nullable=True)
    office_rental_cost = Column(Float, nullable=True)

    def __repr__(self):
        return f"<UniverseStation(station_id={self.station_id}, name={self.name})>"
