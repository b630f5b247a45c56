"""Wallet journal entries per division."""
from sqlalchemy import BigInteger, Column, DateTime, Float, Integer, String, Text

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationWalletJournal(TimestampMixin, Base):
    __tablename__ = "corporation_wallet_journals"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    division = Column(Integer, primary_key=True, autoincrement=False)
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    date = Column(DateTime(timezone=True), nullable=False)
    ref_type = Column(String(64), nullable=False)
    first_party_id = Column(BigInteger, nullable=True)
    second_party_id = Column(BigInteger, nullable=True)
    amount = Column(Float, nullable=True)
    balance = Column(Float, nullable=True)
    reason = Column(Text, nullable=True)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return (f"<CorporationWalletJournal(id={self.id}, division={self.division}, "
                f"ref_type={self.ref_type}, amount={self.amount})>")
