"""Corporation sheet, membership and administration models."""
from eveapi.models.corporation.corporation_info import CorporationInfo
from eveapi.models.corporation.corporation_alliance_history import CorporationAllianceHistory
from eveapi.models.corporation.corporation_blueprint import CorporationBlueprint
from eveapi.models.corporation.corporation_container_log import CorporationContainerLog
from eveapi.models.corporation.corporation_division import CorporationDivision
from eveapi.models.corporation.corporation_facility import CorporationFacility
from eveapi.models.corporation.corporation_issued_medal import CorporationIssuedMedal
from eveapi.models.corporation.corporation_medal import CorporationMedal
from eveapi.models.corporation.corporation_member_limits import CorporationMemberLimits
from eveapi.models.corporation.corporation_member_title import CorporationMemberTitle
from eveapi.models.corporation.corporation_member_tracking import CorporationMemberTracking
from eveapi.models.corporation.corporation_member import CorporationMember
from eveapi.models.corporation.corporation_role import CorporationRole
from eveapi.models.corporation.corporation_role_history import CorporationRoleHistory
from eveapi.models.corporation.corporation_shareholder import CorporationShareholder
from eveapi.models.corporation.corporation_standing import CorporationStanding
from eveapi.models.corporation.corporation_starbase import CorporationStarbase
from eveapi.models.corporation.corporation_structure import CorporationStructure
from eveapi.models.corporation.corporation_title import CorporationTitle
from eveapi.models.corporation.corporation_title_role import CorporationTitleRole

__all__ = [
    "CorporationInfo",
    "CorporationAllianceHistory",
    "CorporationBlueprint",
    "CorporationContainerLog",
    "CorporationDivision",
    "CorporationFacility",
    "CorporationIssuedMedal",
    "CorporationMedal",
    "CorporationMemberLimits",
    "CorporationMemberTitle",
    "CorporationMemberTracking",
    "CorporationMember",
    "CorporationRole",
    "CorporationRoleHistory",
    "CorporationShareholder",
    "CorporationStanding",
    "CorporationStarbase",
    "CorporationStructure",
    "CorporationTitle",
    "CorporationTitleRole",
]
