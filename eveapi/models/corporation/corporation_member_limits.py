"""Maximum number of members the corporation may hold."""
from sqlalchemy import BigInteger, Column, Integer

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationMemberLimits(TimestampMixin, Base):
    __tablename__ = "corporation_member_limits"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    limit = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<CorporationMemberLimits(corporation_id={self.corporation_id}, limit={self.limit})>"
