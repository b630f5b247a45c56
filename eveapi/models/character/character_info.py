"""Character sheet model."""
from sqlalchemy import BigInteger, Column, DateTime, Float, Integer, String, Text

from eveapi.database import Base
from eveapi.models.base import TimestampMixin, belongs_to


class CharacterInfo(TimestampMixin, Base):
    """Public character sheet."""

    __tablename__ = "character_infos"

    character_id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    alliance_id = Column(BigInteger, nullable=True)
    faction_id = Column(Integer, nullable=True)
    birthday = Column(DateTime(timezone=True), nullable=True)
    gender = Column(String(16), nullable=True)
    race_id = Column(Integer, nullable=True)
    bloodline_id = Column(Integer, nullable=True)
    ancestry_id = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
    security_status = Column(Float, nullable=True)

    corporation = belongs_to("CharacterInfo", "CorporationInfo", "corporation_id", "corporation_id")

    def __repr__(self):
        return (f"<CharacterInfo(character_id={self.character_id}, name={self.name}, "
                f"corporation_id={self.corporation_id})>")
