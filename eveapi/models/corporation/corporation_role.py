"""Roles granted to members."""
from sqlalchemy import BigInteger, Column, Integer, String, UniqueConstraint

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationRole(TimestampMixin, Base):
    __tablename__ = "corporation_roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    character_id = Column(BigInteger, nullable=False)
    # roles, grantable_roles, roles_at_hq, roles_at_base, roles_at_other, ...
    type = Column(String(32), nullable=False)
    role = Column(String(64), nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "corporation_id", "character_id", "type", "role", name="uq_corporation_roles_grant"
        ),
    )

    def __repr__(self):
        return f"<CorporationRole(character_id={self.character_id}, type={self.type}, role={self.role})>"
