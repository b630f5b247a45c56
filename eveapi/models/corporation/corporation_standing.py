"""NPC standings towards the corporation."""
from sqlalchemy import BigInteger, Column, Float, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationStanding(TimestampMixin, Base):
    __tablename__ = "corporation_standings"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    # agent, npc_corp or faction
    from_type = Column(String(16), primary_key=True)
    from_id = Column(BigInteger, primary_key=True, autoincrement=False)
    standing = Column(Float, nullable=False, default=0.0)

    def __repr__(self):
        return (f"<CorporationStanding(from_type={self.from_type}, from_id={self.from_id}, "
                f"standing={self.standing})>")
