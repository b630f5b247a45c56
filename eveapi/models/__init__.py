"""Database models."""
from eveapi.models.alliances import Alliance
from eveapi.models.assets import CorporationAsset
from eveapi.models.bookmarks import CorporationBookmark, CorporationBookmarkFolder
from eveapi.models.character import CharacterInfo
from eveapi.models.contacts import CorporationContact, CorporationLabel
from eveapi.models.contracts import CorporationContract
from eveapi.models.corporation import (
    CorporationInfo,
    CorporationAllianceHistory,
    CorporationBlueprint,
    CorporationContainerLog,
    CorporationDivision,
    CorporationFacility,
    CorporationIssuedMedal,
    CorporationMedal,
    CorporationMemberLimits,
    CorporationMemberTitle,
    CorporationMemberTracking,
    CorporationMember,
    CorporationRole,
    CorporationRoleHistory,
    CorporationShareholder,
    CorporationStanding,
    CorporationStarbase,
    CorporationStructure,
    CorporationTitle,
    CorporationTitleRole,
)
from eveapi.models.industry import CorporationIndustryJob, CorporationIndustryMiningExtraction
from eveapi.models.killmails import CorporationKillmail
from eveapi.models.market import CorporationOrder
from eveapi.models.planetary_interaction import CorporationCustomsOffice
from eveapi.models.sde import MapDenormalize, MapSovereignty
from eveapi.models.universe import UniverseName, UniverseStation
from eveapi.models.wallet import (
    CorporationWalletBalance,
    CorporationWalletJournal,
    CorporationWalletTransaction,
)

__all__ = [
    "Alliance",
    "CharacterInfo",
    "CorporationInfo",
    "CorporationAllianceHistory",
    "CorporationAsset",
    "CorporationBlueprint",
    "CorporationBookmark",
    "CorporationBookmarkFolder",
    "CorporationContact",
    "CorporationLabel",
    "CorporationContainerLog",
    "CorporationContract",
    "CorporationCustomsOffice",
    "CorporationDivision",
    "CorporationFacility",
    "CorporationIndustryJob",
    "CorporationIndustryMiningExtraction",
    "CorporationIssuedMedal",
    "CorporationKillmail",
    "CorporationMedal",
    "CorporationMemberLimits",
    "CorporationMemberTitle",
    "CorporationMemberTracking",
    "CorporationMember",
    "CorporationOrder",
    "CorporationRole",
    "CorporationRoleHistory",
    "CorporationShareholder",
    "CorporationStanding",
    "CorporationStarbase",
    "CorporationStructure",
    "CorporationTitle",
    "CorporationTitleRole",
    "CorporationWalletBalance",
    "CorporationWalletJournal",
    "CorporationWalletTransaction",
    "MapDenormalize",
    "MapSovereignty",
    "UniverseName",
    "UniverseStation",
]
