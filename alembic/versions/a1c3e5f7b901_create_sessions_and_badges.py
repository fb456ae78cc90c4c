"""create_sessions_and_badges

Revision ID: a1c3e5f7b901
Revises:
Create Date: 2026-10-17 10:12:40.118204

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql

# revision identifiers, used by Alembic.
revision = 'a1c3e5f7b901'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'sessions',
        sa.Column('id', sa.String(length=255), primary_key=True),
        sa.Column('shop', sa.String(length=255), nullable=False),
        sa.Column('state', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('is_online', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('scope', sa.String(length=1024), nullable=True),
        sa.Column('expires', sa.DateTime(timezone=True), nullable=True),
        sa.Column('access_token', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_sessions_shop', 'sessions', ['shop'])

    op.create_table(
        'badges',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('shop', sa.String(length=255), nullable=False),
        sa.Column('product_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('color', sa.String(length=32), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), 'mysql'), nullable=False),
    )

    # Índices (sin UNIQUE en shop+product_id: se permiten varias badges por producto)
    op.create_index('ix_badges_shop', 'badges', ['shop'])
    op.create_index('ix_badges_shop_product_id', 'badges', ['shop', 'product_id'])


def downgrade() -> None:
    op.drop_index('ix_badges_shop_product_id', table_name='badges')
    op.drop_index('ix_badges_shop', table_name='badges')
    op.drop_table('badges')
    op.drop_index('ix_sessions_shop', table_name='sessions')
    op.drop_table('sessions')
