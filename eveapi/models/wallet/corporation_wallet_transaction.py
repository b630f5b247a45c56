"""Market transactions per wallet division."""
from sqlalchemy import BigInteger, Boolean, Column, DateTime, Float, Integer

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationWalletTransaction(TimestampMixin, Base):
    __tablename__ = "corporation_wallet_transactions"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    division = Column(Integer, primary_key=True, autoincrement=False)
    transaction_id = Column(BigInteger, primary_key=True, autoincrement=False)
    date = Column(DateTime(timezone=True), nullable=False)
    type_id = Column(Integer, nullable=False)
    location_id = Column(BigInteger, nullable=False)
    unit_price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    client_id = Column(BigInteger, nullable=False)
    is_buy = Column(Boolean, nullable=False)
    journal_ref_id = Column(BigInteger, nullable=False)

    def __repr__(self):
        return (f"<CorporationWalletTransaction(transaction_id={self.transaction_id}, "
                f"type_id={self.type_id}, quantity={self.quantity})>")
