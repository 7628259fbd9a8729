"""Create activities table

Revision ID: 002
Revises: 001
Create Date: 2025-02-06 09:30:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the activity feed table"""
    op.create_table('activities',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('garden_plan_id', sa.Uuid(), nullable=True),
        sa.Column('activity_type', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['garden_plan_id'], ['garden_plans.id'], ondelete='SET NULL'),
    )
    op.create_index('ix_activities_user_id', 'activities', ['user_id'])
    op.create_index('ix_activities_garden_plan_id', 'activities', ['garden_plan_id'])


def downgrade() -> None:
    """Drop the activity feed table"""
    op.drop_index('ix_activities_garden_plan_id', table_name='activities')
    op.drop_index('ix_activities_user_id', table_name='activities')
    op.drop_table('activities')
