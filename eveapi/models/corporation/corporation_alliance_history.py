"""Corporation alliance membership history."""
from sqlalchemy import BigInteger, Boolean, Column, DateTime, Integer

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationAllianceHistory(TimestampMixin, Base):
    __tablename__ = "corporation_alliance_histories"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    record_id = Column(Integer, primary_key=True, autoincrement=False)
    alliance_id = Column(BigInteger, nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=False)
    is_deleted = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return (f"<CorporationAllianceHistory(corporation_id={self.corporation_id}, "
                f"record_id={self.record_id}, alliance_id={self.alliance_id})>")
