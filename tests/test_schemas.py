"""Tests for response schema datetime serialization."""
from datetime import UTC, datetime, timedelta, timezone

from eveapi.schemas.base import serialize_datetime_utc
from eveapi.schemas.corporation import AllianceSummary, CorporationSheet, EntityName
from eveapi.schemas.industry import MiningExtractionResponse

# SQLite hands timestamps back without tzinfo
ARRIVAL = datetime(2019, 5, 8, 18, 0, 0)


def _extraction(**overrides):
    values = {
        "corporation_id": 98000001,
        "structure_id": 1022734985679,
        "moon_id": 40161465,
        "extraction_start_time": ARRIVAL - timedelta(days=14),
        "chunk_arrival_time": ARRIVAL,
        "natural_decay_time": ARRIVAL + timedelta(hours=3),
        "expires_at": (ARRIVAL + timedelta(days=2)).replace(tzinfo=UTC),
        "is_ready": True,
        "is_expired": False,
    }
    values.update(overrides)
    return MiningExtractionResponse(**values)


def test_serialize_datetime_utc_formats():
    assert serialize_datetime_utc(ARRIVAL) == "2019-05-08T18:00:00Z"
    assert serialize_datetime_utc(ARRIVAL.replace(tzinfo=UTC)) == "2019-05-08T18:00:00Z"
    plus_two = timezone(timedelta(hours=2))
    assert serialize_datetime_utc(datetime(2019, 5, 8, 20, 0, tzinfo=plus_two)) == "2019-05-08T18:00:00Z"


def test_naive_timestamps_get_z_suffix_in_json_mode():
    data = _extraction().model_dump(mode="json")

    assert data["chunk_arrival_time"] == "2019-05-08T18:00:00Z"
    assert data["extraction_start_time"] == "2019-04-24T18:00:00Z"
    assert data["natural_decay_time"] == "2019-05-08T21:00:00Z"
    assert data["expires_at"] == "2019-05-10T18:00:00Z"


def test_naive_timestamps_get_z_suffix_in_python_mode():
    data = _extraction().model_dump()

    assert data["chunk_arrival_time"] == "2019-05-08T18:00:00Z"
    assert data["is_ready"] is True


def test_json_output_includes_z_suffix():
    assert '"chunk_arrival_time":"2019-05-08T18:00:00Z"' in _extraction().model_dump_json()


def test_optional_datetime_and_nested_models():
    sheet = CorporationSheet(
        corporation_id=98000001,
        name="Test Corp",
        ticker="TEST",
        member_count=1,
        ceo_id=90000001,
        tax_rate=0.1,
        creator_id=90000001,
        alliance=AllianceSummary(alliance_id=0, name=""),
        ceo=EntityName(entity_id=0, category="character", name="Unknown"),
        member_limit=0,
    )

    data = sheet.model_dump(mode="json")

    assert data["date_founded"] is None
    assert data["alliance"] == {"alliance_id": 0, "name": ""}
    assert data["ceo"]["name"] == "Unknown"

    founded = sheet.model_copy(update={"date_founded": ARRIVAL}).model_dump(mode="json")
    assert founded["date_founded"] == "2019-05-08T18:00:00Z"
