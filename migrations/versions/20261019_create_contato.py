"""
Create contato table.

Revision ID: 20261019_create_contato
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = '20261019_create_contato'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'contato',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('nome', sa.Text(), nullable=True),
        sa.Column('telefone', sa.Text(), nullable=True),
        sa.Column('ativo', sa.Boolean(), nullable=False, server_default=sa.false()),
        sqlite_autoincrement=True,
    )


def downgrade():
    op.drop_table('contato')
