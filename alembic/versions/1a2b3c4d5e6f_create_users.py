"""create_users

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2026-10-19

Adds:
- users table with profile fields and the session token column
"""
from alembic import op
import sqlalchemy as sa

revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('weight', sa.Numeric(5, 2), nullable=False),
        sa.Column('height', sa.Numeric(3, 0), nullable=False),
        sa.Column('session_id', sa.String(64), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index(op.f('ix_users_session_id'), 'users', ['session_id'], unique=True)


def downgrade() -> None:
    op.drop_index(op.f('ix_users_session_id'), table_name='users')
    op.drop_table('users')
