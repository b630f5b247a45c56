from eveapi.models.industry.corporation_industry_job import CorporationIndustryJob
from eveapi.models.industry.corporation_industry_mining_extraction import (
    CorporationIndustryMiningExtraction,
)

__all__ = ["CorporationIndustryJob", "CorporationIndustryMiningExtraction"]
