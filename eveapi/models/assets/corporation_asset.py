"""Corporation asset list."""
from sqlalchemy import BigInteger, Boolean, Column, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationAsset(TimestampMixin, Base):
    __tablename__ = "corporation_assets"

    item_id = Column(BigInteger, primary_key=True, autoincrement=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    type_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    location_id = Column(BigInteger, nullable=False, index=True)
    # station, solar_system or other
    location_type = Column(String(32), nullable=False)
    location_flag = Column(String(64), nullable=False)
    is_singleton = Column(Boolean, nullable=False, default=False)
    name = Column(String(255), nullable=True)

    def __repr__(self):
        return (f"<CorporationAsset(item_id={self.item_id}, type_id={self.type_id}, "
                f"quantity={self.quantity})>")
