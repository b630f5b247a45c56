"""Sanity checks for Alembic migration ordering.

The files in ``eveapi/migrations/versions`` must form a single linear upgrade
path with no missing or duplicate revisions, otherwise ``alembic upgrade
head`` breaks.
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from sqlalchemy import inspect


VERSIONS_DIR = Path(__file__).resolve().parents[1] / "eveapi" / "migrations" / "versions"

REVISION_PATTERN = re.compile(r"^revision:\s*.*?['\"]([^'\"]+)['\"]", re.MULTILINE)
DOWN_REVISION_PATTERN = re.compile(r"^down_revision:\s*.*?=\s*(.+)$", re.MULTILINE)


def _parse_revisions() -> dict[str, str | None]:
    revisions: dict[str, str | None] = {}
    for path in VERSIONS_DIR.glob("*.py"):
        text = path.read_text()

        revision_match = REVISION_PATTERN.search(text)
        if not revision_match:
            raise AssertionError(f"Missing revision identifier in {path.name}")

        revision = revision_match.group(1)
        assert revision not in revisions, f"Duplicate revision {revision} in {path.name}"

        down_revision = None
        down_match = DOWN_REVISION_PATTERN.search(text)
        if down_match:
            string_match = re.search(r"['\"]([^'\"]*)['\"]", down_match.group(1))
            if string_match and string_match.group(1):
                down_revision = string_match.group(1)

        revisions[revision] = down_revision

    return revisions


def test_migrations_have_single_head() -> None:
    revisions = _parse_revisions()
    referenced = {down for down in revisions.values() if down}

    missing = referenced - set(revisions)
    assert not missing, f"Missing migration files referenced by down_revision: {missing}"

    heads = sorted(set(revisions) - referenced)
    assert heads == ["005"], f"Unexpected migration heads: {heads}"

    roots = [revision for revision, down in revisions.items() if down is None]
    assert roots == ["001"]

    # Walk from head to root
    chain = []
    current: str | None = heads[0]
    while current:
        chain.append(current)
        current = revisions[current]

    assert chain == ["005", "004", "003", "002", "001"]


@pytest.mark.asyncio
async def test_upgrade_creates_every_model_table(test_engine):
    """Every mapped table should exist after ``alembic upgrade head``."""
    from eveapi.database import Base
    import eveapi.models  # noqa: F401

    async with test_engine.connect() as conn:
        table_names = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))

    missing = set(Base.metadata.tables) - table_names
    assert not missing, f"Tables missing after migration: {sorted(missing)}"


def test_downgrade_to_base_and_back(tmp_path) -> None:
    """Every downgrade must undo its upgrade on a scratch database."""
    from alembic import command
    from alembic.config import Config as AlembicConfig
    from sqlalchemy import create_engine

    db_path = tmp_path / "migrations.db"
    alembic_cfg = AlembicConfig(str(Path(__file__).resolve().parents[1] / "alembic.ini"))
    alembic_cfg.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")

    command.upgrade(alembic_cfg, "head")
    command.downgrade(alembic_cfg, "base")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        with engine.connect() as conn:
            assert set(inspect(conn).get_table_names()) == {"alembic_version"}
    finally:
        engine.dispose()

    command.upgrade(alembic_cfg, "head")
