"""Hangar and wallet division names."""
from sqlalchemy import BigInteger, Column, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationDivision(TimestampMixin, Base):
    __tablename__ = "corporation_divisions"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    # hangar or wallet
    type = Column(String(16), primary_key=True)
    division = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<CorporationDivision(type={self.type}, division={self.division}, name={self.name})>"
