"""Corporation contact list."""
from sqlalchemy import JSON, BigInteger, Boolean, Column, Float, Integer, String, UniqueConstraint
from sqlalchemy.ext.mutable import MutableList

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationContact(TimestampMixin, Base):
    __tablename__ = "corporation_contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    contact_id = Column(BigInteger, nullable=False)
    # character, corporation, alliance or faction
    contact_type = Column(String(16), nullable=False)
    standing = Column(Float, nullable=False, default=0.0)
    is_watched = Column(Boolean, nullable=True)
    label_ids = Column(MutableList.as_mutable(JSON), nullable=True)

    __table_args__ = (
        UniqueConstraint("corporation_id", "contact_id", name="uq_corporation_contacts_contact"),
    )

    def __repr__(self):
        return f"<CorporationContact(contact_id={self.contact_id}, standing={self.standing})>"
