"""Titles defined by the corporation."""
from sqlalchemy import BigInteger, Column, Integer, String, UniqueConstraint

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationTitle(TimestampMixin, Base):
    __tablename__ = "corporation_titles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    title_id = Column(Integer, nullable=False)
    name = Column(String(255), nullable=True)

    __table_args__ = (
        UniqueConstraint("corporation_id", "title_id", name="uq_corporation_titles_title"),
    )

    def __repr__(self):
        return f"<CorporationTitle(title_id={self.title_id}, name={self.name})>"
