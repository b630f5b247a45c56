"""Titles held by each member."""
from sqlalchemy import BigInteger, Column, Integer

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationMemberTitle(TimestampMixin, Base):
    __tablename__ = "corporation_member_titles"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    character_id = Column(BigInteger, primary_key=True, autoincrement=False)
    title_id = Column(Integer, primary_key=True, autoincrement=False)

    def __repr__(self):
        return (f"<CorporationMemberTitle(character_id={self.character_id}, "
                f"title_id={self.title_id})>")
