"""Shared corporation bookmark folders."""
from sqlalchemy import BigInteger, Column, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationBookmarkFolder(TimestampMixin, Base):
    __tablename__ = "corporation_bookmark_folders"

    folder_id = Column(BigInteger, primary_key=True, autoincrement=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    creator_id = Column(BigInteger, nullable=True)

    def __repr__(self):
        return f"<CorporationBookmarkFolder(folder_id={self.folder_id}, name={self.name})>"
