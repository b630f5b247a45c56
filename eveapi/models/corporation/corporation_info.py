"""Corporation sheet model."""
from sqlalchemy import BigInteger, Column, DateTime, Float, Integer, String, Text

from eveapi.config import get_settings
from eveapi.database import Base
from eveapi.models.base import TimestampMixin, belongs_to, has_many, has_one, with_default


def _unknown_entity_name() -> str:
    return get_settings().unknown_entity_name


class CorporationInfo(TimestampMixin, Base):
    """Corporation sheet and the root of every corporation-owned collection.

    Related rows are keyed on ``corporation_id`` without database-level
    foreign keys. Collections must be loaded explicitly; the alliance, CEO,
    home station and member limit are loaded with the corporation.
    """

    __tablename__ = "corporation_infos"

    corporation_id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    ticker = Column(String(8), nullable=False)
    member_count = Column(Integer, nullable=False, default=0)
    ceo_id = Column(BigInteger, nullable=False)
    alliance_id = Column(BigInteger, nullable=True, index=True)
    description = Column(Text, nullable=True)
    tax_rate = Column(Float, nullable=False, default=0.0)
    date_founded = Column(DateTime(timezone=True), nullable=True)
    creator_id = Column(BigInteger, nullable=False)
    url = Column(String(255), nullable=True)
    faction_id = Column(Integer, nullable=True)
    home_station_id = Column(BigInteger, nullable=True)
    shares = Column(Float, nullable=True)

    # Corporation-owned collections
    alliance_history = has_many("CorporationInfo", "CorporationAllianceHistory", "corporation_id")
    assets = has_many("CorporationInfo", "CorporationAsset", "corporation_id")
    blueprints = has_many("CorporationInfo", "CorporationBlueprint", "corporation_id")
    bookmarks = has_many("CorporationInfo", "CorporationBookmark", "corporation_id")
    bookmark_folders = has_many("CorporationInfo", "CorporationBookmarkFolder", "corporation_id")
    contacts = has_many("CorporationInfo", "CorporationContact", "corporation_id")
    contact_labels = has_many("CorporationInfo", "CorporationLabel", "corporation_id")
    container_logs = has_many("CorporationInfo", "CorporationContainerLog", "corporation_id")
    contracts = has_many("CorporationInfo", "CorporationContract", "corporation_id")
    pocos = has_many("CorporationInfo", "CorporationCustomsOffice", "corporation_id")
    divisions = has_many("CorporationInfo", "CorporationDivision", "corporation_id")
    facilities = has_many("CorporationInfo", "CorporationFacility", "corporation_id")
    industry_jobs = has_many("CorporationInfo", "CorporationIndustryJob", "corporation_id")
    mining_extractions = has_many(
        "CorporationInfo", "CorporationIndustryMiningExtraction", "corporation_id"
    )
    issued_medals = has_many("CorporationInfo", "CorporationIssuedMedal", "corporation_id")
    killmails = has_many("CorporationInfo", "CorporationKillmail", "corporation_id")
    medals = has_many("CorporationInfo", "CorporationMedal", "corporation_id")
    member_limit = has_one("CorporationInfo", "CorporationMemberLimits", "corporation_id")
    member_titles = has_many("CorporationInfo", "CorporationMemberTitle", "corporation_id")
    member_tracking = has_many("CorporationInfo", "CorporationMemberTracking", "corporation_id")
    members = has_many("CorporationInfo", "CorporationMember", "corporation_id")
    orders = has_many("CorporationInfo", "CorporationOrder", "corporation_id")
    roles = has_many("CorporationInfo", "CorporationRole", "corporation_id")
    role_history = has_many("CorporationInfo", "CorporationRoleHistory", "corporation_id")
    shareholders = has_many("CorporationInfo", "CorporationShareholder", "corporation_id")
    standings = has_many("CorporationInfo", "CorporationStanding", "corporation_id")
    starbases = has_many("CorporationInfo", "CorporationStarbase", "corporation_id")
    structures = has_many("CorporationInfo", "CorporationStructure", "corporation_id")
    titles = has_many("CorporationInfo", "CorporationTitle", "corporation_id")
    title_roles = has_many("CorporationInfo", "CorporationTitleRole", "corporation_id")
    wallet_balances = has_many("CorporationInfo", "CorporationWalletBalance", "corporation_id")
    wallet_journal = has_many("CorporationInfo", "CorporationWalletJournal", "corporation_id")
    wallet_transactions = has_many(
        "CorporationInfo", "CorporationWalletTransaction", "corporation_id"
    )

    # Shared reference data
    characters = has_many("CorporationInfo", "CharacterInfo", "corporation_id")
    home_station = belongs_to("CorporationInfo", "UniverseStation", "home_station_id", "station_id")
    alliance = belongs_to("CorporationInfo", "Alliance", "alliance_id", "alliance_id")
    ceo = belongs_to("CorporationInfo", "UniverseName", "ceo_id", "entity_id")

    alliance_or_default = with_default("alliance", alliance_id=0, name="")
    ceo_or_default = with_default(
        "ceo", entity_id=0, category="character", name=_unknown_entity_name
    )
    member_limit_or_default = with_default("member_limit", limit=0)

    def __repr__(self):
        return (f"<CorporationInfo(corporation_id={self.corporation_id}, name={self.name}, "
                f"ticker={self.ticker})>")
