"""Shared corporation bookmarks."""
from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationBookmark(TimestampMixin, Base):
    __tablename__ = "corporation_bookmarks"

    bookmark_id = Column(BigInteger, primary_key=True, autoincrement=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    folder_id = Column(BigInteger, nullable=True)
    creator_id = Column(BigInteger, nullable=False)
    created = Column(DateTime(timezone=True), nullable=False)
    label = Column(String(255), nullable=False)
    notes = Column(Text, nullable=True)
    location_id = Column(Integer, nullable=False)
    item_id = Column(BigInteger, nullable=True)
    item_type_id = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<CorporationBookmark(bookmark_id={self.bookmark_id}, label={self.label})>"
