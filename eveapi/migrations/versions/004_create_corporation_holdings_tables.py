"""Create corporation assets, bookmarks, contacts, contracts, industry, market and wallet tables.

Revision ID: 004
Revises: 003
Create Date: 2019-03-09
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from eveapi.migrations.util import timestamps

# revision identifiers, used by Alembic.
revision: str = '004'
down_revision: Union[str, None] = '003'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

INDEXED_BY_CORPORATION = (
    'corporation_assets',
    'corporation_bookmarks',
    'corporation_bookmark_folders',
    'corporation_contacts',
    'corporation_industry_jobs',
)


def upgrade() -> None:
    op.create_table(
        'corporation_assets',
        sa.Column('item_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('location_id', sa.BigInteger(), nullable=False),
        sa.Column('location_type', sa.String(length=32), nullable=False),
        sa.Column('location_flag', sa.String(length=64), nullable=False),
        sa.Column('is_singleton', sa.Boolean(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('item_id'),
    )
    op.create_index('ix_corporation_assets_location_id', 'corporation_assets', ['location_id'], unique=False)

    op.create_table(
        'corporation_bookmarks',
        sa.Column('bookmark_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('folder_id', sa.BigInteger(), nullable=True),
        sa.Column('creator_id', sa.BigInteger(), nullable=False),
        sa.Column('created', sa.DateTime(timezone=True), nullable=False),
        sa.Column('label', sa.String(length=255), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.Column('item_id', sa.BigInteger(), nullable=True),
        sa.Column('item_type_id', sa.Integer(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('bookmark_id'),
    )

    op.create_table(
        'corporation_bookmark_folders',
        sa.Column('folder_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('creator_id', sa.BigInteger(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('folder_id'),
    )

    op.create_table(
        'corporation_contacts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('contact_id', sa.BigInteger(), nullable=False),
        sa.Column('contact_type', sa.String(length=16), nullable=False),
        sa.Column('standing', sa.Float(), nullable=False),
        sa.Column('is_watched', sa.Boolean(), nullable=True),
        sa.Column('label_ids', sa.JSON(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('corporation_id', 'contact_id', name='uq_corporation_contacts_contact'),
    )

    op.create_table(
        'corporation_labels',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('label_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('label_name', sa.String(length=255), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'label_id'),
    )

    op.create_table(
        'corporation_contracts',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('contract_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('issuer_id', sa.BigInteger(), nullable=False),
        sa.Column('assignee_id', sa.BigInteger(), nullable=True),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('availability', sa.String(length=16), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('for_corporation', sa.Boolean(), nullable=False),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('reward', sa.Float(), nullable=True),
        sa.Column('collateral', sa.Float(), nullable=True),
        sa.Column('date_issued', sa.DateTime(timezone=True), nullable=False),
        sa.Column('date_expired', sa.DateTime(timezone=True), nullable=False),
        sa.Column('date_completed', sa.DateTime(timezone=True), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'contract_id'),
    )

    op.create_table(
        'corporation_industry_jobs',
        sa.Column('job_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=False),
        sa.Column('installer_id', sa.BigInteger(), nullable=False),
        sa.Column('facility_id', sa.BigInteger(), nullable=False),
        sa.Column('location_id', sa.BigInteger(), nullable=False),
        sa.Column('activity_id', sa.Integer(), nullable=False),
        sa.Column('blueprint_id', sa.BigInteger(), nullable=False),
        sa.Column('blueprint_type_id', sa.Integer(), nullable=False),
        sa.Column('output_location_id', sa.BigInteger(), nullable=True),
        sa.Column('runs', sa.Integer(), nullable=False),
        sa.Column('cost', sa.Float(), nullable=True),
        sa.Column('licensed_runs', sa.Integer(), nullable=True),
        sa.Column('probability', sa.Float(), nullable=True),
        sa.Column('product_type_id', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('job_id'),
    )

    op.create_table(
        'corporation_killmails',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('killmail_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('killmail_hash', sa.String(length=64), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'killmail_id'),
    )

    op.create_table(
        'corporation_orders',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('order_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('region_id', sa.Integer(), nullable=False),
        sa.Column('location_id', sa.BigInteger(), nullable=False),
        sa.Column('issued_by', sa.BigInteger(), nullable=True),
        sa.Column('wallet_division', sa.Integer(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('volume_total', sa.Integer(), nullable=False),
        sa.Column('volume_remain', sa.Integer(), nullable=False),
        sa.Column('min_volume', sa.Integer(), nullable=True),
        sa.Column('is_buy_order', sa.Boolean(), nullable=False),
        sa.Column('escrow', sa.Float(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('range', sa.String(length=16), nullable=False),
        sa.Column('state', sa.String(length=16), nullable=False),
        sa.Column('issued', sa.DateTime(timezone=True), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'order_id'),
    )

    op.create_table(
        'corporation_customs_offices',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('office_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('system_id', sa.Integer(), nullable=False),
        sa.Column('reinforce_exit_start', sa.Integer(), nullable=False),
        sa.Column('reinforce_exit_end', sa.Integer(), nullable=False),
        sa.Column('allow_alliance_access', sa.Boolean(), nullable=False),
        sa.Column('allow_access_with_standings', sa.Boolean(), nullable=False),
        sa.Column('standing_level', sa.String(length=16), nullable=True),
        sa.Column('alliance_tax_rate', sa.Float(), nullable=True),
        sa.Column('corporation_tax_rate', sa.Float(), nullable=True),
        sa.Column('neutral_standing_tax_rate', sa.Float(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'office_id'),
    )

    op.create_table(
        'corporation_wallet_balances',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('division', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('balance', sa.Float(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'division'),
    )

    op.create_table(
        'corporation_wallet_journals',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('division', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('ref_type', sa.String(length=64), nullable=False),
        sa.Column('first_party_id', sa.BigInteger(), nullable=True),
        sa.Column('second_party_id', sa.BigInteger(), nullable=True),
        sa.Column('amount', sa.Float(), nullable=True),
        sa.Column('balance', sa.Float(), nullable=True),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'division', 'id'),
    )

    op.create_table(
        'corporation_wallet_transactions',
        sa.Column('corporation_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('division', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('transaction_id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('location_id', sa.BigInteger(), nullable=False),
        sa.Column('unit_price', sa.Float(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('client_id', sa.BigInteger(), nullable=False),
        sa.Column('is_buy', sa.Boolean(), nullable=False),
        sa.Column('journal_ref_id', sa.BigInteger(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('corporation_id', 'division', 'transaction_id'),
    )

    for table_name in INDEXED_BY_CORPORATION:
        op.create_index(f'ix_{table_name}_corporation_id', table_name, ['corporation_id'], unique=False)


def downgrade() -> None:
    for table_name in INDEXED_BY_CORPORATION:
        op.drop_index(f'ix_{table_name}_corporation_id', table_name=table_name)

    op.drop_table('corporation_wallet_transactions')
    op.drop_table('corporation_wallet_journals')
    op.drop_table('corporation_wallet_balances')
    op.drop_table('corporation_customs_offices')
    op.drop_table('corporation_orders')
    op.drop_table('corporation_killmails')
    op.drop_table('corporation_industry_jobs')
    op.drop_table('corporation_contracts')
    op.drop_table('corporation_labels')
    op.drop_table('corporation_contacts')
    op.drop_table('corporation_bookmark_folders')
    op.drop_table('corporation_bookmarks')
    op.drop_index('ix_corporation_assets_location_id', table_name='corporation_assets')
    op.drop_table('corporation_assets')
