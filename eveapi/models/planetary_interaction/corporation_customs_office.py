"""Player-owned customs offices (POCOs)."""
from sqlalchemy import BigInteger, Boolean, Column, Float, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationCustomsOffice(TimestampMixin, Base):
    __tablename__ = "corporation_customs_offices"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    office_id = Column(BigInteger, primary_key=True, autoincrement=False)
    system_id = Column(Integer, nullable=False)
    reinforce_exit_start = Column(Integer, nullable=False)
    reinforce_exit_end = Column(Integer, nullable=False)
    allow_alliance_access = Column(Boolean, nullable=False, default=False)
    allow_access_with_standings = Column(Boolean, nullable=False, default=False)
    # bad, excellent, good, neutral, terrible
    standing_level = Column(String(16), nullable=True)
    alliance_tax_rate = Column(Float, nullable=True)
    corporation_tax_rate = Column(Float, nullable=True)
    neutral_standing_tax_rate = Column(Float, nullable=True)

    def __repr__(self):
        return f"<CorporationCustomsOffice(office_id={self.office_id}, system_id={self.system_id})>"
