"""Utility functions for Alembic migrations."""
import sqlalchemy as sa
from alembic import op


def get_timestamp_default():
    """Get the appropriate server default for timestamp columns.

    Returns:
        Server default compatible with the current database dialect:
        - PostgreSQL: NOW() function
        - SQLite: CURRENT_TIMESTAMP
    """
    bind = op.get_bind()
    dialect_name = bind.dialect.name
    if dialect_name == 'postgresql':
        return sa.text('NOW()')
    else:
        return sa.text('CURRENT_TIMESTAMP')


def timestamps():
    """Return the ``created_at``/``updated_at`` column pair shared by most tables.

    Example usage in a migration:
        from eveapi.migrations.util import timestamps

        def upgrade() -> None:
            op.create_table(
                'my_table',
                sa.Column('id', sa.BigInteger(), nullable=False),
                *timestamps(),
                sa.PrimaryKeyConstraint('id'),
            )
    """
    timestamp_default = get_timestamp_default()
    return (
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True, server_default=timestamp_default),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True, server_default=timestamp_default),
    )
