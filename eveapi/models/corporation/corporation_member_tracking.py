"""Member login tracking."""
from sqlalchemy import BigInteger, Column, DateTime, Integer

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationMemberTracking(TimestampMixin, Base):
    __tablename__ = "corporation_member_trackings"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    character_id = Column(BigInteger, primary_key=True, autoincrement=False)
    start_date = Column(DateTime(timezone=True), nullable=True)
    base_id = Column(BigInteger, nullable=True)
    logon_date = Column(DateTime(timezone=True), nullable=True)
    logoff_date = Column(DateTime(timezone=True), nullable=True)
    location_id = Column(BigInteger, nullable=True)
    ship_type_id = Column(Integer, nullable=True)

    def __repr__(self):
        return (f"<CorporationMemberTracking(character_id={self.character_id}, "
                f"logon_date={self.logon_date})>")
