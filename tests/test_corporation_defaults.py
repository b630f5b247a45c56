"""Tests for corporation relationships and their placeholder defaults."""
import pytest
from sqlalchemy.exc import InvalidRequestError

from eveapi.config import get_settings
from eveapi.models import (
    Alliance,
    CharacterInfo,
    CorporationInfo,
    CorporationMemberLimits,
    UniverseName,
    UniverseStation,
)
from eveapi.services import CorporationService


class TestCorporationDefaults:
    """Placeholders returned when a related row has not been fetched yet."""

    @pytest.mark.asyncio
    async def test_unknown_relations_fall_back_to_placeholders(self, db_session, corporation_factory):
        created = await corporation_factory(alliance_id=None)

        corporation = await CorporationService(db_session).get_corporation(created.corporation_id)

        assert corporation.alliance is None
        alliance = corporation.alliance_or_default
        assert isinstance(alliance, Alliance)
        assert alliance.alliance_id == 0
        assert alliance.name == ""

        ceo = corporation.ceo_or_default
        assert isinstance(ceo, UniverseName)
        assert ceo.entity_id == 0
        assert ceo.category == "character"
        assert ceo.name == "Unknown"

        assert corporation.member_limit_or_default.limit == 0
        assert corporation.home_station is None

    @pytest.mark.asyncio
    async def test_placeholders_are_not_added_to_session(self, db_session, corporation_factory):
        created = await corporation_factory()
        corporation = await CorporationService(db_session).get_corporation(created.corporation_id)

        placeholder = corporation.alliance_or_default

        assert placeholder not in db_session
        assert corporation.alliance_or_default is not placeholder

    @pytest.mark.asyncio
    async def test_ceo_placeholder_uses_configured_label(self, db_session, corporation_factory, monkeypatch):
        monkeypatch.setattr(get_settings(), "unknown_entity_name", "Unresolved")
        created = await corporation_factory()

        corporation = await CorporationService(db_session).get_corporation(created.corporation_id)

        assert corporation.ceo_or_default.name == "Unresolved"

    @pytest.mark.asyncio
    async def test_existing_relations_are_returned(self, db_session, corporation_factory, next_id):
        alliance_id = next_id()
        station_id = next_id()
        created = await corporation_factory(alliance_id=alliance_id, home_station_id=station_id)

        db_session.add_all([
            Alliance(
                alliance_id=alliance_id,
                name="Goonswarm Federation",
                ticker="CONDI",
                executor_corporation_id=created.corporation_id,
            ),
            UniverseName(entity_id=created.ceo_id, name="The Mittani", category="character"),
            UniverseStation(station_id=station_id, name="Jita IV - Moon 4", system_id=30000142),
            CorporationMemberLimits(corporation_id=created.corporation_id, limit=12600),
        ])
        await db_session.commit()
        db_session.expunge_all()

        corporation = await CorporationService(db_session).get_corporation(created.corporation_id)

        assert corporation.alliance_or_default.name == "Goonswarm Federation"
        assert corporation.ceo_or_default.name == "The Mittani"
        assert corporation.member_limit_or_default.limit == 12600
        assert corporation.home_station.system_id == 30000142


class TestCorporationCollections:

    @pytest.mark.asyncio
    async def test_collections_load_on_request(self, db_session, corporation_factory, next_id):
        created = await corporation_factory()
        other = await corporation_factory()
        db_session.add_all([
            CharacterInfo(character_id=next_id(), name="Pilot One", corporation_id=created.corporation_id),
            CharacterInfo(character_id=next_id(), name="Pilot Two", corporation_id=created.corporation_id),
            CharacterInfo(character_id=next_id(), name="Outsider", corporation_id=other.corporation_id),
        ])
        await db_session.commit()
        db_session.expunge_all()

        corporation = await CorporationService(db_session).get_corporation(
            created.corporation_id, "characters"
        )

        assert sorted(c.name for c in corporation.characters) == ["Pilot One", "Pilot Two"]

    @pytest.mark.asyncio
    async def test_collections_are_not_loaded_implicitly(self, db_session, corporation_factory):
        created = await corporation_factory()
        corporation = await CorporationService(db_session).get_corporation(created.corporation_id)

        with pytest.raises(InvalidRequestError):
            _ = corporation.assets

    @pytest.mark.asyncio
    async def test_unknown_corporation_returns_none(self, db_session, next_id):
        assert await CorporationService(db_session).get_corporation(next_id()) is None

    def test_repr_names_corporation(self):
        corporation = CorporationInfo(corporation_id=98000001, name="Test Corp", ticker="TEST")

        assert "98000001" in repr(corporation)
        assert "TEST" in repr(corporation)
