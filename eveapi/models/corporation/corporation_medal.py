"""Medals designed by the corporation."""
from sqlalchemy import BigInteger, Column, String, Text

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationMedal(TimestampMixin, Base):
    __tablename__ = "corporation_medals"

    medal_id = Column(BigInteger, primary_key=True, autoincrement=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    creator_id = Column(BigInteger, nullable=False)

    def __repr__(self):
        return f"<CorporationMedal(medal_id={self.medal_id}, title={self.title})>"
