"""Corporation-owned blueprints."""
from sqlalchemy import BigInteger, Column, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationBlueprint(TimestampMixin, Base):
    __tablename__ = "corporation_blueprints"

    item_id = Column(BigInteger, primary_key=True, autoincrement=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    type_id = Column(Integer, nullable=False)
    location_id = Column(BigInteger, nullable=True)
    location_flag = Column(String(64), nullable=True)
    # -1 for an original, -2 for a copy, otherwise the stack size
    quantity = Column(Integer, nullable=False, default=-1)
    time_efficiency = Column(Integer, nullable=False, default=0)
    material_efficiency = Column(Integer, nullable=False, default=0)
    # -1 for an original
    runs = Column(Integer, nullable=False, default=-1)

    def __repr__(self):
        return f"<CorporationBlueprint(item_id={self.item_id}, type_id={self.type_id})>"
