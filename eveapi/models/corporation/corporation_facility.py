"""Industry facilities operated by the corporation."""
from sqlalchemy import BigInteger, Column, Integer

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationFacility(TimestampMixin, Base):
    __tablename__ = "corporation_facilities"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    facility_id = Column(BigInteger, primary_key=True, autoincrement=False)
    type_id = Column(Integer, nullable=False)
    system_id = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<CorporationFacility(facility_id={self.facility_id}, system_id={self.system_id})>"
