"""Add suspect column to crime (schema version 2)

Revision ID: 8e4d2a6c5b21
Revises: 3b1f9c2d7a10
Create Date: 2026-10-19 09:31:02.554911
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '8e4d2a6c5b21'
down_revision = '3b1f9c2d7a10'
branch_labels = None
depends_on = None


def upgrade():
    # Existing rows receive '' through the server default; nothing else changes.
    op.add_column('crime', sa.Column('suspect', sa.Text(), nullable=False, server_default=''))


def downgrade():
    with op.batch_alter_table('crime') as batch_op:
        batch_op.drop_column('suspect')
