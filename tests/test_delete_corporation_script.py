"""Tests for the delete_corporation.py command-line script."""
import asyncio
import sys

import pytest

from delete_corporation import main, run_delete
from eveapi.database import engine
from eveapi.models import CorporationMember
from eveapi.services import CorporationService


@pytest.mark.asyncio
async def test_dry_run_then_delete(db_session, corporation_factory, next_id, capsys):
    corporation = await corporation_factory(name="Doomed Corp")
    corporation_id = corporation.corporation_id
    db_session.add_all([
        CorporationMember(corporation_id=corporation_id, character_id=next_id()),
        CorporationMember(corporation_id=corporation_id, character_id=next_id()),
    ])
    await db_session.commit()

    try:
        counts = await run_delete(corporation_id, dry_run=True)
        dry_run_output = capsys.readouterr().out

        assert counts["members"] == 2
        assert "DRY RUN" in dry_run_output
        assert "Doomed Corp" in dry_run_output
        assert "  members: 2" in dry_run_output
        assert "assets" not in dry_run_output
        assert await CorporationService(db_session).get_corporation(corporation_id) is not None

        deleted = await run_delete(corporation_id, skip_confirmation=True)

        assert deleted["members"] == 2
        assert deleted["corporation_infos"] == 1
        assert "Deleted: 3 total rows" in capsys.readouterr().out
        assert await CorporationService(db_session).get_corporation(corporation_id) is None

        assert await run_delete(corporation_id, skip_confirmation=True) is None
        assert "not found" in capsys.readouterr().err
    finally:
        await engine.dispose()


def test_main_exits_nonzero_for_unknown_corporation(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["delete_corporation.py", "97999999", "-y"])

    try:
        with pytest.raises(SystemExit) as exc_info:
            main()
    finally:
        asyncio.run(engine.dispose())

    assert exc_info.value.code == 1
    assert "Corporation 97999999 not found" in capsys.readouterr().err


def test_main_dry_run_exits_cleanly_for_known_corporation(monkeypatch):
    async def _fake_run_delete(**kwargs):
        assert kwargs == {
            "corporation_id": 98000001,
            "dry_run": True,
            "verbose": False,
            "skip_confirmation": False,
        }
        return {"members": 0}

    monkeypatch.setattr("delete_corporation.run_delete", _fake_run_delete)
    monkeypatch.setattr(sys, "argv", ["delete_corporation.py", "98000001", "--dry-run"])

    main()
