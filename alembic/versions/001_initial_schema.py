"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create endpoints table
    op.create_table(
        'endpoints',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('key', sa.Text(), nullable=False),
        sa.Column('response', sa.LargeBinary(), nullable=False),
        sa.Column('created_by_sha', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_endpoints_key'), 'endpoints', ['key'], unique=False)

    # Create requests table
    op.create_table(
        'requests',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('key', sa.Text(), nullable=False),
        sa.Column('request_sha', sa.String(length=64), nullable=False),
        sa.Column('metadata', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_requests_key'), 'requests', ['key'], unique=False)
    op.create_index('idx_requests_key_sha', 'requests', ['key', 'request_sha'], unique=False)


def downgrade() -> None:
    # Drop tables in reverse order
    op.drop_index('idx_requests_key_sha', table_name='requests')
    op.drop_index(op.f('ix_requests_key'), table_name='requests')
    op.drop_table('requests')

    op.drop_index(op.f('ix_endpoints_key'), table_name='endpoints')
    op.drop_table('endpoints')
