"""Create crime table (schema version 1)

Revision ID: 3b1f9c2d7a10
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f9c2d7a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the crime table without the suspect column."""
    op.create_table(
        'crime',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, unique=True),
        sa.Column('title', sa.Text(), nullable=False, server_default=''),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('is_solved', sa.Boolean(), nullable=False, server_default=sa.false()),
    )


def downgrade() -> None:
    op.drop_table('crime')
