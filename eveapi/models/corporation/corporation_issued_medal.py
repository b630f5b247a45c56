"""Medals awarded by the corporation."""
from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationIssuedMedal(TimestampMixin, Base):
    __tablename__ = "corporation_issued_medals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    medal_id = Column(BigInteger, nullable=False)
    character_id = Column(BigInteger, nullable=False)
    reason = Column(Text, nullable=True)
    # private or public
    status = Column(String(16), nullable=False, default="private")
    issuer_id = Column(BigInteger, nullable=False)
    issued_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return (f"<CorporationIssuedMedal(medal_id={self.medal_id}, "
                f"character_id={self.character_id})>")
