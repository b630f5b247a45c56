from eveapi.services.corporation_service import (
    CorporationService,
    CorporationServiceError,
    CorporationNotFoundError,
)
from eveapi.services.mining_extraction_service import (
    MiningExtractionService,
    ExtractionServiceError,
    InvalidDrillingDurationError,
)
from eveapi.services.sovereignty_service import SovereigntyService

__all__ = [
    "CorporationService",
    "CorporationServiceError",
    "CorporationNotFoundError",
    "MiningExtractionService",
    "ExtractionServiceError",
    "InvalidDrillingDurationError",
    "SovereigntyService",
]
