"""add_carts

Revision ID: b7d2f5a8c3e1
Revises: a1c4e7f2b9d0
Create Date: 2026-10-14 16:21:07.540912

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'b7d2f5a8c3e1'
down_revision: Union[str, None] = 'a1c4e7f2b9d0'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('carts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('items', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('carts')
