"""Contracts issued by or to the corporation."""
from sqlalchemy import BigInteger, Boolean, Column, DateTime, Float, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationContract(TimestampMixin, Base):
    __tablename__ = "corporation_contracts"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    contract_id = Column(BigInteger, primary_key=True, autoincrement=False)
    issuer_id = Column(BigInteger, nullable=False)
    assignee_id = Column(BigInteger, nullable=True)
    # item_exchange, auction, courier, loan, unknown
    type = Column(String(16), nullable=False)
    status = Column(String(32), nullable=False)
    availability = Column(String(16), nullable=True)
    title = Column(String(255), nullable=True)
    for_corporation = Column(Boolean, nullable=False, default=False)
    price = Column(Float, nullable=True)
    reward = Column(Float, nullable=True)
    collateral = Column(Float, nullable=True)
    date_issued = Column(DateTime(timezone=True), nullable=False)
    date_expired = Column(DateTime(timezone=True), nullable=False)
    date_completed = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return (f"<CorporationContract(contract_id={self.contract_id}, type={self.type}, "
                f"status={self.status})>")
