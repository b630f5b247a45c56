"""API tests for corporation, sovereignty and health endpoints."""
from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient, ASGITransport

from eveapi.models import (
    Alliance,
    CorporationAsset,
    CorporationIndustryMiningExtraction,
    CorporationMemberLimits,
    MapSovereignty,
)


API_BASE_URL = "http://test"


@pytest.mark.asyncio
async def test_health_check(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "connected"


@pytest.mark.asyncio
async def test_get_corporation_sheet_with_defaults(test_app, corporation_factory):
    corporation = await corporation_factory()

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.get(f"/corporations/{corporation.corporation_id}")

    assert response.status_code == 200
    data = response.json()
    assert data["corporation_id"] == corporation.corporation_id
    assert data["ticker"] == corporation.ticker
    assert data["alliance"] == {"alliance_id": 0, "name": ""}
    assert data["ceo"] == {"entity_id": 0, "category": "character", "name": "Unknown"}
    assert data["member_limit"] == 0
    assert data["date_founded"].endswith("Z")


@pytest.mark.asyncio
async def test_get_corporation_sheet_with_relations(test_app, db_session, corporation_factory, next_id):
    alliance_id = next_id()
    corporation = await corporation_factory(alliance_id=alliance_id)
    db_session.add_all([
        Alliance(alliance_id=alliance_id, name="Test Alliance", ticker="TA"),
        CorporationMemberLimits(corporation_id=corporation.corporation_id, limit=3000),
    ])
    await db_session.commit()

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.get(f"/corporations/{corporation.corporation_id}")

    data = response.json()
    assert data["alliance"] == {"alliance_id": alliance_id, "name": "Test Alliance"}
    assert data["member_limit"] == 3000


@pytest.mark.asyncio
async def test_get_unknown_corporation_returns_404(test_app, next_id):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.get(f"/corporations/{next_id()}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_invalid_corporation_id_returns_validation_error(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.get("/corporations/not-a-number")

    assert response.status_code == 422
    data = response.json()
    assert data["detail"] == "Request validation failed"
    assert data["errors"][0]["field"] == "corporation_id"


@pytest.mark.asyncio
async def test_related_counts_and_delete(test_app, db_session, corporation_factory, next_id):
    corporation = await corporation_factory()
    corporation_id = corporation.corporation_id
    db_session.add_all([
        CorporationAsset(
            item_id=next_id(),
            corporation_id=corporation_id,
            type_id=34,
            quantity=1000,
            location_id=60003760,
            location_type="station",
            location_flag="CorpSAG1",
        )
        for _ in range(3)
    ])
    await db_session.commit()

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        counts_response = await client.get(f"/corporations/{corporation_id}/related-counts")
        delete_response = await client.delete(f"/corporations/{corporation_id}")
        missing_response = await client.get(f"/corporations/{corporation_id}")
        second_delete = await client.delete(f"/corporations/{corporation_id}")

    assert counts_response.status_code == 200
    assert counts_response.json()["counts"]["assets"] == 3

    assert delete_response.status_code == 200
    data = delete_response.json()
    assert data["deleted"]["assets"] == 3
    assert data["deleted"]["corporation_infos"] == 1
    assert data["total_deleted"] == 4

    assert missing_response.status_code == 404
    assert second_delete.status_code == 404


@pytest.mark.asyncio
async def test_list_extractions(test_app, db_session, corporation_factory, next_id):
    corporation = await corporation_factory()
    arrival = datetime.now(UTC) - timedelta(hours=1)
    db_session.add(
        CorporationIndustryMiningExtraction(
            corporation_id=corporation.corporation_id,
            structure_id=next_id(),
            moon_id=40161465,
            extraction_start_time=arrival - timedelta(days=14),
            chunk_arrival_time=arrival,
            natural_decay_time=arrival + timedelta(hours=3),
        )
    )
    await db_session.commit()

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.get(f"/corporations/{corporation.corporation_id}/extractions")

    assert response.status_code == 200
    extractions = response.json()
    assert len(extractions) == 1
    assert extractions[0]["is_ready"] is True
    assert extractions[0]["is_expired"] is False
    for field in ("extraction_start_time", "chunk_arrival_time", "natural_decay_time", "expires_at"):
        assert extractions[0][field].endswith("Z"), field


@pytest.mark.asyncio
async def test_record_extraction(test_app, corporation_factory, next_id):
    corporation = await corporation_factory()
    arrival = datetime.now(UTC) + timedelta(days=7)
    payload = {
        "structure_id": next_id(),
        "moon_id": 40161465,
        "extraction_start_time": (arrival - timedelta(days=14)).isoformat(),
        "chunk_arrival_time": arrival.isoformat(),
        "natural_decay_time": (arrival + timedelta(hours=3)).isoformat(),
    }

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.post(f"/corporations/{corporation.corporation_id}/extractions", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["structure_id"] == payload["structure_id"]
    assert data["is_ready"] is False


@pytest.mark.asyncio
async def test_record_extraction_rejects_invalid_drilling(test_app, corporation_factory, next_id):
    corporation = await corporation_factory()
    arrival = datetime.now(UTC) + timedelta(days=1)
    payload = {
        "structure_id": next_id(),
        "moon_id": 40161465,
        "extraction_start_time": (arrival - timedelta(days=60)).isoformat(),
        "chunk_arrival_time": arrival.isoformat(),
        "natural_decay_time": (arrival + timedelta(hours=3)).isoformat(),
    }

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.post(f"/corporations/{corporation.corporation_id}/extractions", json=payload)
        unknown = await client.post(f"/corporations/{next_id()}/extractions", json=payload)

    assert response.status_code == 422
    assert "outside the allowed range" in response.json()["detail"]
    assert unknown.status_code == 404


@pytest.mark.asyncio
async def test_alliance_sovereignty(test_app, db_session, next_id):
    alliance_id = next_id()
    system_id = next_id()
    holder_id = next_id()
    db_session.add(
        MapSovereignty(
            solar_system_id=system_id,
            alliance_id=alliance_id,
            faction_id=0,
            solar_system_name=f"System-{system_id}",
            corporation_id=holder_id,
        )
    )
    await db_session.commit()

    async with AsyncClient(transport=ASGITransport(app=test_app), base_url=API_BASE_URL) as client:
        response = await client.get(f"/sovereignty/alliances/{alliance_id}")

    assert response.status_code == 200
    assert response.json() == [
        {
            "solar_system_id": system_id,
            "solar_system_name": f"System-{system_id}",
            "alliance_id": alliance_id,
            "corporation_id": holder_id,
            "faction_id": 0,
        }
    ]
