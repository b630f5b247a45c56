"""Corporation market orders."""
from sqlalchemy import BigInteger, Boolean, Column, DateTime, Float, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationOrder(TimestampMixin, Base):
    __tablename__ = "corporation_orders"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    order_id = Column(BigInteger, primary_key=True, autoincrement=False)
    type_id = Column(Integer, nullable=False)
    region_id = Column(Integer, nullable=False)
    location_id = Column(BigInteger, nullable=False)
    issued_by = Column(BigInteger, nullable=True)
    wallet_division = Column(Integer, nullable=False, default=1)
    price = Column(Float, nullable=False)
    volume_total = Column(Integer, nullable=False)
    volume_remain = Column(Integer, nullable=False)
    min_volume = Column(Integer, nullable=True)
    is_buy_order = Column(Boolean, nullable=False, default=False)
    escrow = Column(Float, nullable=True)
    duration = Column(Integer, nullable=False)
    range = Column(String(16), nullable=False)
    # open, cancelled, expired
    state = Column(String(16), nullable=False, default="open")
    issued = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return (f"<CorporationOrder(order_id={self.order_id}, type_id={self.type_id}, "
                f"state={self.state})>")
