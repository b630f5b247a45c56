"""Audit log of secure container interactions."""
from sqlalchemy import BigInteger, Column, DateTime, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationContainerLog(TimestampMixin, Base):
    __tablename__ = "corporation_container_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    container_id = Column(BigInteger, nullable=False)
    container_type_id = Column(Integer, nullable=True)
    character_id = Column(BigInteger, nullable=False)
    logged_at = Column(DateTime(timezone=True), nullable=False)
    location_id = Column(BigInteger, nullable=True)
    location_flag = Column(String(64), nullable=True)
    action = Column(String(32), nullable=False)
    password_type = Column(String(32), nullable=True)
    type_id = Column(Integer, nullable=True)
    quantity = Column(Integer, nullable=True)
    old_config_bitmask = Column(Integer, nullable=True)
    new_config_bitmask = Column(Integer, nullable=True)

    def __repr__(self):
        return (f"<CorporationContainerLog(container_id={self.container_id}, "
                f"action={self.action}, logged_at={self.logged_at})>")
