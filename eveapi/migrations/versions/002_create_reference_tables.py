"""Create static data, universe, alliance and character tables.

Revision ID: 002
Revises: 001
Create Date: 2019-03-02
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from eveapi.migrations.util import timestamps

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'mapDenormalize',
        sa.Column('itemID', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('typeID', sa.Integer(), nullable=True),
        sa.Column('groupID', sa.Integer(), nullable=True),
        sa.Column('solarSystemID', sa.Integer(), nullable=True),
        sa.Column('constellationID', sa.Integer(), nullable=True),
        sa.Column('regionID', sa.Integer(), nullable=True),
        sa.Column('orbitID', sa.Integer(), nullable=True),
        sa.Column('x', sa.Float(), nullable=True),
        sa.Column('y', sa.Float(), nullable=True),
        sa.Column('z', sa.Float(), nullable=True),
        sa.Column('radius', sa.Float(), nullable=True),
        sa.Column('itemName', sa.String(length=100), nullable=True),
        sa.Column('security', sa.Float(), nullable=True),
        sa.Column('celestialIndex', sa.Integer(), nullable=True),
        sa.Column('orbitIndex', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('itemID'),
    )
    op.create_index('ix_mapDenormalize_solarSystemID', 'mapDenormalize', ['solarSystemID'], unique=False)

    op.create_table(
        'universe_names',
        sa.Column('entity_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=32), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('entity_id'),
    )

    op.create_table(
        'universe_stations',
        sa.Column('station_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=True),
        sa.Column('system_id', sa.Integer(), nullable=False),
        sa.Column('owner', sa.BigInteger(), nullable=True),
        sa.Column('race_id', sa.Integer(), nullable=True),
        sa.Column('x', sa.Float(), nullable=True),
        sa.Column('y', sa.Float(), nullable=True),
        sa.Column('z', sa.Float(), nullable=True),
        sa.Column('reprocessing_efficiency', sa.Float(), nullable=True),
        sa.Column('reprocessing_stations_take', sa.Float(), nullable=True),
        sa.Column('max_dockable_ship_volume', sa.Float(), nullable=True),
        sa.Column('office_rental_cost', sa.Float(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('station_id'),
    )
    op.create_index('ix_universe_stations_system_id', 'universe_stations', ['system_id'], unique=False)

    op.create_table(
        'alliances',
        sa.Column('alliance_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('ticker', sa.String(length=8), nullable=True),
        sa.Column('creator_id', sa.BigInteger(), nullable=True),
        sa.Column('creator_corporation_id', sa.BigInteger(), nullable=True),
        sa.Column('executor_corporation_id', sa.BigInteger(), nullable=True),
        sa.Column('date_founded', sa.DateTime(timezone=True), nullable=True),
        sa.Column('faction_id', sa.Integer(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('alliance_id'),
    )

    op.create_table(
        'character_infos',
        sa.Column('character_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('alliance_id', sa.BigInteger(), nullable=True),
        sa.Column('faction_id', sa.Integer(), nullable=True),
        sa.Column('birthday', sa.DateTime(timezone=True), nullable=True),
        sa.Column('gender', sa.String(length=16), nullable=True),
        sa.Column('race_id', sa.Integer(), nullable=True),
        sa.Column('bloodline_id', sa.Integer(), nullable=True),
        sa.Column('ancestry_id', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('security_status', sa.Float(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('character_id'),
    )
    op.create_index('ix_character_infos_corporation_id', 'character_infos', ['corporation_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_character_infos_corporation_id', table_name='character_infos')
    op.drop_table('character_infos')
    op.drop_table('alliances')
    op.drop_index('ix_universe_stations_system_id', table_name='universe_stations')
    op.drop_table('universe_stations')
    op.drop_table('universe_names')
    op.drop_index('ix_mapDenormalize_solarSystemID', table_name='mapDenormalize')
    op.drop_table('mapDenormalize')
