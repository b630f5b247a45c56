"""Contact labels."""
from sqlalchemy import BigInteger, Column, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationLabel(TimestampMixin, Base):
    __tablename__ = "corporation_labels"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    label_id = Column(BigInteger, primary_key=True, autoincrement=False)
    label_name = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<CorporationLabel(label_id={self.label_id}, label_name={self.label_name})>"
