"""Create corporation sheet, membership and administration tables.

Revision ID: 003
Revises: 002
Create Date: 2019-03-02
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from eveapi.migrations.util import timestamps

# revision identifiers, used by Alembic.
revision: str = '003'
down_revision: Union[str, None] = '002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Tables whose only secondary index is on corporation_id
INDEXED_BY_CORPORATION = (
    'corporation_blueprints',
    'corporation_container_logs',
    'corporation_issued_medals',
    'corporation_medals',
    'corporation_roles',
    'corporation_role_histories',
    'corporation_titles',
    'corporation_title_roles',
)


def upgrade() -> None:
    op.create_table(
        'corporation_infos',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('ticker', sa.String(length=8), nullable=False),
        sa.Column('member_count', sa.Integer(), nullable=False),
        sa.Column('ceo_id', sa.BigInteger(), nullable=False),
        sa.Column('alliance_id', sa.BigInteger(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('tax_rate', sa.Float(), nullable=False),
        sa.Column('date_founded', sa.DateTime(timezone=True), nullable=True),
        sa.Column('creator_id', sa.BigInteger(), nullable=False),
        sa.Column('url', sa.String(length=255), nullable=True),
        sa.Column('faction_id', sa.Integer(), nullable=True),
        sa.Column('home_station_id', sa.BigInteger(), nullable=True),
        sa.Column('shares', sa.Float(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id'),
    )
    op.create_index('ix_corporation_infos_alliance_id', 'corporation_infos', ['alliance_id'], unique=False)

    op.create_table(
        'corporation_alliance_histories',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('record_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('alliance_id', sa.BigInteger(), nullable=True),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('is_deleted', sa.Boolean(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'record_id'),
    )

    op.create_table(
        'corporation_blueprints',
        sa.Column('item_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('location_id', sa.BigInteger(), nullable=True),
        sa.Column('location_flag', sa.String(length=64), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('time_efficiency', sa.Integer(), nullable=False),
        sa.Column('material_efficiency', sa.Integer(), nullable=False),
        sa.Column('runs', sa.Integer(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('item_id'),
    )

    op.create_table(
        'corporation_container_logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('container_id', sa.BigInteger(), nullable=False),
        sa.Column('container_type_id', sa.Integer(), nullable=True),
        sa.Column('character_id', sa.BigInteger(), nullable=False),
        sa.Column('logged_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('location_id', sa.BigInteger(), nullable=True),
        sa.Column('location_flag', sa.String(length=64), nullable=True),
        sa.Column('action', sa.String(length=32), nullable=False),
        sa.Column('password_type', sa.String(length=32), nullable=True),
        sa.Column('type_id', sa.Integer(), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=True),
        sa.Column('old_config_bitmask', sa.Integer(), nullable=True),
        sa.Column('new_config_bitmask', sa.Integer(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'corporation_divisions',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('division', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'type', 'division'),
    )

    op.create_table(
        'corporation_facilities',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('facility_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('system_id', sa.Integer(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'facility_id'),
    )

    op.create_table(
        'corporation_issued_medals',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('medal_id', sa.BigInteger(), nullable=False),
        sa.Column('character_id', sa.BigInteger(), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('issuer_id', sa.BigInteger(), nullable=False),
        sa.Column('issued_at', sa.DateTime(timezone=True), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'corporation_medals',
        sa.Column('medal_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('creator_id', sa.BigInteger(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('medal_id'),
    )

    op.create_table(
        'corporation_member_limits',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('limit', sa.Integer(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id'),
    )

    op.create_table(
        'corporation_member_titles',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('character_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('title_id', sa.Integer(), autoincrement=False, nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'character_id', 'title_id'),
    )

    op.create_table(
        'corporation_member_trackings',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('character_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('base_id', sa.BigInteger(), nullable=True),
        sa.Column('logon_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('logoff_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('location_id', sa.BigInteger(), nullable=True),
        sa.Column('ship_type_id', sa.Integer(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'character_id'),
    )

    op.create_table(
        'corporation_members',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('character_id', sa.BigInteger(), autoincrement=False, nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'character_id'),
    )

    op.create_table(
        'corporation_roles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('character_id', sa.BigInteger(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('role', sa.String(length=64), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'corporation_id', 'character_id', 'type', 'role', name='uq_corporation_roles_grant'
        ),
    )

    op.create_table(
        'corporation_role_histories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('character_id', sa.BigInteger(), nullable=False),
        sa.Column('changed_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('issuer_id', sa.BigInteger(), nullable=False),
        sa.Column('role_type', sa.String(length=32), nullable=False),
        sa.Column('old_roles', sa.JSON(), nullable=False),
        sa.Column('new_roles', sa.JSON(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'corporation_shareholders',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('shareholder_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('shareholder_type', sa.String(length=16), nullable=False),
        sa.Column('share_count', sa.BigInteger(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'shareholder_id'),
    )

    op.create_table(
        'corporation_standings',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('from_type', sa.String(length=16), nullable=False),
        sa.Column('from_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('standing', sa.Float(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'from_type', 'from_id'),
    )

    op.create_table(
        'corporation_titles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('title_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('corporation_id', 'title_id', name='uq_corporation_titles_title'),
    )

    op.create_table(
        'corporation_title_roles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('title_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('role', sa.String(length=64), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    for table_name in INDEXED_BY_CORPORATION:
        op.create_index(f'ix_{table_name}_corporation_id', table_name, ['corporation_id'], unique=False)


def downgrade() -> None:
    for table_name in INDEXED_BY_CORPORATION:
        op.drop_index(f'ix_{table_name}_corporation_id', table_name=table_name)

    op.drop_table('corporation_title_roles')
    op.drop_table('corporation_titles')
    op.drop_table('corporation_standings')
    op.drop_table('corporation_shareholders')
    op.drop_table('corporation_role_histories')
    op.drop_table('corporation_roles')
    op.drop_table('corporation_members')
    op.drop_table('corporation_member_trackings')
    op.drop_table('corporation_member_titles')
    op.drop_table('corporation_member_limits')
    op.drop_table('corporation_medals')
    op.drop_table('corporation_issued_medals')
    op.drop_table('corporation_facilities')
    op.drop_table('corporation_divisions')
    op.drop_table('corporation_container_logs')
    op.drop_table('corporation_blueprints')
    op.drop_table('corporation_alliance_histories')
    op.drop_index('ix_corporation_infos_alliance_id', table_name='corporation_infos')
    op.drop_table('corporation_infos')
