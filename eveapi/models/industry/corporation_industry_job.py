"""Corporation industry jobs."""
from sqlalchemy import BigInteger, Column, DateTime, Float, Integer, String

from eveapi.database import Base
from eveapi.models.base import TimestampMixin


class CorporationIndustryJob(TimestampMixin, Base):
    __tablename__ = "corporation_industry_jobs"

    job_id = Column(BigInteger, primary_key=True, autoincrement=False)
    corporation_id = Column(BigInteger, nullable=False, index=True)
    installer_id = Column(BigInteger, nullable=False)
    facility_id = Column(BigInteger, nullable=False)
    location_id = Column(BigInteger, nullable=False)
    activity_id = Column(Integer, nullable=False)
    blueprint_id = Column(BigInteger, nullable=False)
    blueprint_type_id = Column(Integer, nullable=False)
    output_location_id = Column(BigInteger, nullable=True)
    runs = Column(Integer, nullable=False, default=1)
    cost = Column(Float, nullable=True)
    licensed_runs = Column(Integer, nullable=True)
    probability = Column(Float, nullable=True)
    product_type_id = Column(Integer, nullable=True)
    # active, cancelled, delivered, paused, ready, reverted
    status = Column(String(16), nullable=False)
    duration = Column(Integer, nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    completed_date = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<CorporationIndustryJob(job_id={self.job_id}, status={self.status})>"
