"""Role change audit trail."""
from sqlalchemy import JSON, BigInteger, Column, DateTime, Integer, String
from sqlalchemy.ext.mutable import MutableList

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationRoleHistory(TimestampMixin, Base):
    __tablename__ = "corporation_role_histories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    character_id = Column(BigInteger, nullable=False)
    changed_at = Column(DateTime(timezone=True), nullable=False)
    issuer_id = Column(BigInteger, nullable=False)
    role_type = Column(String(32), nullable=False)
    old_roles = Column(MutableList.as_mutable(JSON), nullable=False, default=list)
    new_roles = Column(MutableList.as_mutable(JSON), nullable=False, default=list)

    def __repr__(self):
        return (f"<CorporationRoleHistory(character_id={self.character_id}, "
                f"role_type={self.role_type}, changed_at={self.changed_at})>")
