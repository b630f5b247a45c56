"""Create structures, starbases and moon-mining extraction tables.

Revision ID: 005
Revises: 004
Create Date: 2019-04-14
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from eveapi.migrations.util import timestamps

# revision identifiers, used by Alembic.
revision: str = '005'
down_revision: Union[str, None] = '004'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'corporation_structures',
        sa.Column('structure_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('system_id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('state', sa.String(length=32), nullable=False),
        sa.Column('fuel_expires', sa.DateTime(timezone=True), nullable=True),
        sa.Column('state_timer_start', sa.DateTime(timezone=True), nullable=True),
        sa.Column('state_timer_end', sa.DateTime(timezone=True), nullable=True),
        sa.Column('unanchors_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('reinforce_hour', sa.Integer(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('structure_id'),
    )
    op.create_index(
        'ix_corporation_structures_corporation_id', 'corporation_structures', ['corporation_id'], unique=False
    )

    op.create_table(
        'corporation_starbases',
        sa.Column('starbase_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('system_id', sa.Integer(), nullable=False),
        sa.Column('moon_id', sa.Integer(), nullable=True),
        sa.Column('state', sa.String(length=16), nullable=True),
        sa.Column('onlined_since', sa.DateTime(timezone=True), nullable=True),
        sa.Column('reinforced_until', sa.DateTime(timezone=True), nullable=True),
        sa.Column('unanchor_at', sa.DateTime(timezone=True), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('starbase_id'),
    )
    op.create_index(
        'ix_corporation_starbases_corporation_id', 'corporation_starbases', ['corporation_id'], unique=False
    )

    op.create_table(
        'corporation_industry_mining_extractions',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('structure_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('moon_id', sa.Integer(), nullable=False),
        sa.Column('extraction_start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('chunk_arrival_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('natural_decay_time', sa.DateTime(timezone=True), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'structure_id'),
    )
    op.create_index(
        'ix_corporation_industry_mining_extractions_moon_id',
        'corporation_industry_mining_extractions',
        ['moon_id'],
        unique=False,
    )
    op.create_index(
        'ix_corporation_industry_mining_extractions_chunk_arrival_time',
        'corporation_industry_mining_extractions',
        ['chunk_arrival_time'],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        'ix_corporation_industry_mining_extractions_chunk_arrival_time',
        table_name='corporation_industry_mining_extractions',
    )
    op.drop_index(
        'ix_corporation_industry_mining_extractions_moon_id',
        table_name='corporation_industry_mining_extractions',
    )
    op.drop_table('corporation_industry_mining_extractions')
    op.drop_index('ix_corporation_starbases_corporation_id', table_name='corporation_starbases')
    op.drop_table('corporation_starbases')
    op.drop_index('ix_corporation_structures_corporation_id', table_name='corporation_structures')
    op.drop_table('corporation_structures')
