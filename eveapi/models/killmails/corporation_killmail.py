"""Killmails the corporation took part in."""
from sqlalchemy import BigInteger, Column, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationKillmail(TimestampMixin, Base):
    __tablename__ = "corporation_killmails"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    killmail_id = Column(BigInteger, primary_key=True, autoincrement=False)
    killmail_hash = Column(String(64), nullable=False)

    def __repr__(self):
        return f"<CorporationKillmail(killmail_id={self.killmail_id})>"
