"""create_meals

Revision ID: 2b3c4d5e6f7a
Revises: 1a2b3c4d5e6f
Create Date: 2026-10-19

Adds:
- meals table owned by users, with the on-diet flag
"""
from alembic import op
import sqlalchemy as sa

revision = '2b3c4d5e6f7a'
down_revision = '1a2b3c4d5e6f'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'meals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('isOnTheDiet', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_meals_user_id', 'meals', ['user_id'], unique=False)
    op.create_index('idx_meals_user_id_on_diet', 'meals', ['user_id', 'isOnTheDiet'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_meals_user_id_on_diet', table_name='meals')
    op.drop_index('idx_meals_user_id', table_name='meals')
    op.drop_table('meals')
