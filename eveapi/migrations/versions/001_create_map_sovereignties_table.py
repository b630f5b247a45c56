"""Create map sovereignties table.

Revision ID: 001
Revises:
Create Date: 2015-08-30
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from eveapi.migrations.util import timestamps

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'map_sovereignties',
        sa.Column('solarSystemID', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('allianceID', sa.Integer(), nullable=False),
        sa.Column('factionID', sa.Integer(), nullable=False),
        sa.Column('solarSystemName', sa.String(length=255), nullable=False),
        sa.Column('corporationID', sa.Integer(), nullable=False),
        *timestamps(),
        sa.PrimaryKeyConstraint('solarSystemID'),
    )
    op.create_index('map_sovereignties_allianceid_index', 'map_sovereignties', ['allianceID'], unique=False)
    op.create_index(
        'map_sovereignties_solarsystemname_index', 'map_sovereignties', ['solarSystemName'], unique=False
    )


def downgrade() -> None:
    op.drop_index('map_sovereignties_solarsystemname_index', table_name='map_sovereignties')
    op.drop_index('map_sovereignties_allianceid_index', table_name='map_sovereignties')
    op.drop_table('map_sovereignties')
