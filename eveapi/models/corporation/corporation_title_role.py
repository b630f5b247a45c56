"""Roles attached to each title."""
from sqlalchemy import BigInteger, Column, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationTitleRole(TimestampMixin, Base):
    __tablename__ = "corporation_title_roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    title_id = Column(Integer, nullable=False)
    type = Column(String(32), nullable=False)
    role = Column(String(64), nullable=False)

    def __repr__(self):
        return f"<CorporationTitleRole(title_id={self.title_id}, type={self.type}, role={self.role})>"
