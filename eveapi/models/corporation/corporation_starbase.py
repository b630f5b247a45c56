"""Player-owned starbases (control towers)."""
from sqlalchemy import BigInteger, Column, DateTime, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationStarbase(TimestampMixin, Base):
    __tablename__ = "corporation_starbases"

    starbase_id = Column(BigInteger, primary_key=True, autoincrement=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    type_id = Column(Integer, nullable=False)
    system_id = Column(Integer, nullable=False)
    moon_id = Column(Integer, nullable=True)
    # offline, online, onlining, reinforced, unanchoring
    state = Column(String(16), nullable=True)
    onlined_since = Column(DateTime(timezone=True), nullable=True)
    reinforced_until = Column(DateTime(timezone=True), nullable=True)
    unanchor_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<CorporationStarbase(starbase_id={self.starbase_id}, state={self.state})>"
