"""Corporation shareholders."""
from sqlalchemy import BigInteger, Column, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationShareholder(TimestampMixin, Base):
    __tablename__ = "corporation_shareholders"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    shareholder_id = Column(BigInteger, primary_key=True, autoincrement=False)
    # character or corporation
    shareholder_type = Column(String(16), nullable=False)
    share_count = Column(BigInteger, nullable=False, default=0)

    def __repr__(self):
        return (f"<CorporationShareholder(shareholder_id={self.shareholder_id}, "
                f"share_count={self.share_count})>")
