"""Corporation member roster."""
from sqlalchemy import BigInteger, Column

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationMember(TimestampMixin, Base):
    __tablename__ = "corporation_members"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    character_id = Column(BigInteger, primary_key=True, autoincrement=False)

    def __repr__(self):
        return (f"<CorporationMember(corporation_id={self.corporation_id}, "
                f"character_id={self.character_id})>")
