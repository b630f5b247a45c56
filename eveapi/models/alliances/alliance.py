"""Alliance model."""
from sqlalchemy import BigInteger, Column, DateTime, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin, has_many


class Alliance(TimestampMixin, Base):
    """Public alliance information."""

    __tablename__ = "alliances"

    alliance_id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    ticker = Column(String(8), nullable=True)
    creator_id = Column(BigInteger, nullable=True)
    creator_corporation_id = Column(BigInteger, nullable=True)
    executor_corporation_id = Column(BigInteger, nullable=True)
    date_founded = Column(DateTime(timezone=True), nullable=True)
    faction_id = Column(Integer, nullable=True)

    corporations = has_many("Alliance", "CorporationInfo", "alliance_id")
    sovereignties = has_many("Alliance", "MapSovereignty", "alliance_id")

    def __repr__(self):
        return f"<Alliance(alliance_id={self.alliance_id}, name={self.name})>"
