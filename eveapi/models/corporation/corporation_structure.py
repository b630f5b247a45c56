"""Upwell structures owned by the corporation."""
from sqlalchemy import BigInteger, Column, DateTime, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin, belongs_to


class CorporationStructure(TimestampMixin, Base):
    __tablename__ = "corporation_structures"

    structure_id = Column(BigInteger, primary_key=True, autoincrement=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    type_id = Column(Integer, nullable=False)
    system_id = Column(Integer, nullable=False)
    profile_id = Column(Integer, nullable=False)
    state = Column(String(32), nullable=False)
    fuel_expires = Column(DateTime(timezone=True), nullable=True)
    state_timer_start = Column(DateTime(timezone=True), nullable=True)
    state_timer_end = Column(DateTime(timezone=True), nullable=True)
    unanchors_at = Column(DateTime(timezone=True), nullable=True)
    reinforce_hour = Column(Integer, nullable=True)

    corporation = belongs_to("CorporationStructure", "CorporationInfo", "corporation_id", "corporation_id")

    def __repr__(self):
        return f"<CorporationStructure(structure_id={self.structure_id}, state={self.state})>"
