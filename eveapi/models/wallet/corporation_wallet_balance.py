"""Wallet division balances."""
from sqlalchemy import BigInteger, Column, Float, Integer

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationWalletBalance(TimestampMixin, Base):
    __tablename__ = "corporation_wallet_balances"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    division = Column(Integer, primary_key=True, autoincrement=False)
    balance = Column(Float, nullable=False, default=0.0)

    def __repr__(self):
        return (f"<CorporationWalletBalance(corporation_id={self.corporation_id}, "
                f"division={self.division}, balance={self.balance})>")
