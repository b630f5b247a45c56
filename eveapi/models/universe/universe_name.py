"""Resolved entity names."""
from sqlalchemy import BigInteger, Column, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class UniverseName(TimestampMixin, Base):
    """Name and category of any entity id the API has resolved."""

    __tablename__ = "universe_names"

    entity_id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    # alliance, character, constellation, corporation, faction, ...
    category = Column(String(32), nullable=False)

    def __repr__(self):
        return f"<UniverseName(entity_id={self.entity_id}, category={self.category}, name={self.name})>"
