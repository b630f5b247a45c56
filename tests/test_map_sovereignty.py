"""Tests for the sovereignty map table and its lookups."""
import pytest
from sqlalchemy import inspect

from eveapi.models import Alliance, MapSovereignty
from eveapi.services import SovereigntyService


async def _inspect_table(test_engine, table_name):
    def _collect(sync_conn):
        inspector = inspect(sync_conn)
        return (
            {column["name"]: column for column in inspector.get_columns(table_name)},
            inspector.get_pk_constraint(table_name),
            {index["name"]: index for index in inspector.get_indexes(table_name)},
        )

    async with test_engine.connect() as conn:
        return await conn.run_sync(_collect)


class TestMapSovereigntySchema:

    @pytest.mark.asyncio
    async def test_columns_and_primary_key(self, test_engine):
        columns, primary_key, _ = await _inspect_table(test_engine, "map_sovereignties")

        assert {
            "solarSystemID",
            "allianceID",
            "factionID",
            "solarSystemName",
            "corporationID",
            "created_at",
            "updated_at",
        } <= set(columns)
        assert primary_key["constrained_columns"] == ["solarSystemID"]
        for name in ("allianceID", "factionID", "solarSystemName", "corporationID"):
            assert columns[name]["nullable"] is False
        assert columns["created_at"]["nullable"] is True

    @pytest.mark.asyncio
    async def test_secondary_indexes(self, test_engine):
        _, _, indexes = await _inspect_table(test_engine, "map_sovereignties")

        assert indexes["map_sovereignties_allianceid_index"]["column_names"] == ["allianceID"]
        assert indexes["map_sovereignties_solarsystemname_index"]["column_names"] == ["solarSystemName"]
        assert not indexes["map_sovereignties_allianceid_index"]["unique"]


class TestSovereigntyService:

    @pytest.mark.asyncio
    async def test_systems_for_alliance_ordered_by_name(self, db_session, next_id):
        alliance_id = next_id()
        db_session.add_all([
            MapSovereignty(
                solar_system_id=next_id(),
                alliance_id=alliance_id,
                faction_id=0,
                solar_system_name=f"VFK-{alliance_id}",
                corporation_id=next_id(),
            ),
            MapSovereignty(
                solar_system_id=next_id(),
                alliance_id=alliance_id,
                faction_id=0,
                solar_system_name=f"1DQ1-{alliance_id}",
                corporation_id=next_id(),
            ),
            MapSovereignty(
                solar_system_id=next_id(),
                alliance_id=next_id(),
                faction_id=0,
                solar_system_name=f"M-OEE8-{alliance_id}",
                corporation_id=next_id(),
            ),
        ])
        await db_session.commit()

        systems = await SovereigntyService(db_session).systems_for_alliance(alliance_id)

        assert [s.solar_system_name for s in systems] == [f"1DQ1-{alliance_id}", f"VFK-{alliance_id}"]

    @pytest.mark.asyncio
    async def test_get_system_by_name(self, db_session, next_id):
        system_id = next_id()
        name = f"HED-GP-{system_id}"
        db_session.add(
            MapSovereignty(
                solar_system_id=system_id,
                alliance_id=next_id(),
                faction_id=0,
                solar_system_name=name,
                corporation_id=next_id(),
            )
        )
        await db_session.commit()

        service = SovereigntyService(db_session)
        system = await service.get_system_by_name(name)

        assert system.solar_system_id == system_id
        assert await service.get_system_by_name(f"missing-{system_id}") is None

    @pytest.mark.asyncio
    async def test_alliance_belongs_to_sovereignty(self, db_session, next_id):
        alliance_id = next_id()
        system_id = next_id()
        db_session.add_all([
            Alliance(alliance_id=alliance_id, name="Pandemic Horde", ticker="REKTD"),
            MapSovereignty(
                solar_system_id=system_id,
                alliance_id=alliance_id,
                faction_id=0,
                solar_system_name=f"Sovereign-{system_id}",
                corporation_id=next_id(),
            ),
        ])
        await db_session.commit()
        db_session.expunge_all()

        system = await db_session.get(MapSovereignty, system_id)

        assert system.alliance.name == "Pandemic Horde"
