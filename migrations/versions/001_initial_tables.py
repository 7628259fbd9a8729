"""Create garden planner tables

Revision ID: 001
Revises:
Create Date: 2025-01-23 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# BIGSERIAL on PostgreSQL, rowid autoincrement on SQLite
CatalogId = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def _timestamps(updated: bool = True) -> list:
    columns = [sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)]
    if updated:
        columns.append(
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)
        )
    return columns


def upgrade() -> None:
    """Create garden planner tables"""

    # 1. Profiles
    op.create_table('profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=True),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        *_timestamps(),

        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_profiles_full_name', 'profiles', ['full_name'])

    # 2. Plant library
    op.create_table('plants_library',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('common_name', sa.String(255), nullable=True),
        sa.Column('other_name', sa.String(255), nullable=True),
        sa.Column('scientific_name', sa.String(255), nullable=True),
        sa.Column('short_description', sa.Text(), nullable=True),
        sa.Column('origin', sa.String(255), nullable=True),
        sa.Column('plant_type', sa.String(100), nullable=True),
        sa.Column('climate', sa.String(100), nullable=True),
        sa.Column('life_cycle', sa.String(100), nullable=True),
        sa.Column('watering_frequency', sa.String(100), nullable=True),
        sa.Column('soil_type', sa.String(255), nullable=True),
        sa.Column('size', sa.String(100), nullable=True),
        sa.Column('sunlight_requirement', sa.String(100), nullable=True),
        sa.Column('growth_rate', sa.String(100), nullable=True),
        sa.Column('ideal_place', sa.String(255), nullable=True),
        sa.Column('care_level', sa.String(100), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('best_planting_season', sa.String(100), nullable=True),
        sa.Column('gardening_tips', sa.Text(), nullable=True),
        sa.Column('pruning_guide', sa.Text(), nullable=True),
        sa.Column('seed_depth', sa.Float(), nullable=True),
        sa.Column('germination_time', sa.Float(), nullable=True),
        sa.Column('time_to_harvest', sa.Float(), nullable=True),
        sa.Column('temperature_min', sa.Numeric(5, 2), nullable=True),
        sa.Column('temperature_max', sa.Numeric(5, 2), nullable=True),
        sa.Column('flower', sa.Boolean(), nullable=True),
        sa.Column('fruit', sa.Boolean(), nullable=True),
        sa.Column('medicinal', sa.Boolean(), nullable=True),
        sa.Column('common_pests', sa.JSON(), nullable=True),
        sa.Column('common_diseases', sa.JSON(), nullable=True),
        sa.Column('companion_plants', sa.JSON(), nullable=True),
        sa.Column('avoid_planting_with', sa.JSON(), nullable=True),
        sa.Column('pest_disease_prevention_tips', sa.JSON(), nullable=True),
        sa.Column('cool_facts', sa.JSON(), nullable=True),
        sa.Column('edible_parts', sa.JSON(), nullable=True),
        *_timestamps(),

        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plants_library_common_name', 'plants_library', ['common_name'])
    op.create_index('ix_plants_library_plant_type', 'plants_library', ['plant_type'])

    # 3. Garden plans and their plants
    op.create_table('garden_plans',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('thumbnail_url', sa.Text(), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),

        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_garden_plans_user_id', 'garden_plans', ['user_id'])

    op.create_table('plants',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('garden_plan_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('watering_frequency', sa.String(100), nullable=True),
        sa.Column('sunlight_requirements', sa.String(100), nullable=True),
        sa.Column('position_x', sa.Integer(), nullable=True),
        sa.Column('position_y', sa.Integer(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        *_timestamps(),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['garden_plan_id'], ['garden_plans.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_plants_garden_plan_id', 'plants', ['garden_plan_id'])

    # 4. Community
    op.create_table('garden_images',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('garden_plan_id', sa.Uuid(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        *_timestamps(updated=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['garden_plan_id'], ['garden_plans.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_garden_images_garden_plan_id', 'garden_images', ['garden_plan_id'])

    op.create_table('image_comments',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('image_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False),
        *_timestamps(updated=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['image_id'], ['garden_images.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_image_comments_image_id', 'image_comments', ['image_id'])
    op.create_index('ix_image_comments_user_id', 'image_comments', ['user_id'])

    op.create_table('image_likes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('image_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        *_timestamps(updated=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['image_id'], ['garden_images.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('image_id', 'user_id', name='uq_image_likes_image_user'),
    )
    op.create_index('ix_image_likes_image_id', 'image_likes', ['image_id'])
    op.create_index('ix_image_likes_user_id', 'image_likes', ['user_id'])

    # 5. Care reminders
    op.create_table('plant_reminders',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('plant_id', sa.Uuid(), nullable=False),
        sa.Column('garden_plan_id', sa.Uuid(), nullable=False),
        sa.Column('reminder_type', sa.String(100), nullable=False),
        sa.Column('reminder_date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(updated=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['garden_plan_id'], ['garden_plans.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_plant_reminders_plant_id', 'plant_reminders', ['plant_id'])
    op.create_index('ix_plant_reminders_garden_plan_id', 'plant_reminders', ['garden_plan_id'])
    op.create_index('ix_plant_reminders_reminder_date', 'plant_reminders', ['reminder_date'])

    # 6. Pest and disease catalogues
    op.create_table('pests',
        sa.Column('id', CatalogId, autoincrement=True, nullable=False),
        sa.Column('common_name', sa.String(255), nullable=False),
        sa.Column('scientific_name', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('damage_symptoms', sa.Text(), nullable=True),
        sa.Column('life_cycle', sa.Text(), nullable=True),
        sa.Column('season_active', sa.String(255), nullable=True),
        sa.Column('organic_control', sa.Text(), nullable=True),
        sa.Column('chemical_control', sa.Text(), nullable=True),
        sa.Column('prevention_tips', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        *_timestamps(),

        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_pests_common_name', 'pests', ['common_name'])

    op.create_table('plant_diseases',
        sa.Column('id', CatalogId, autoincrement=True, nullable=False),
        sa.Column('common_name', sa.String(255), nullable=False),
        sa.Column('scientific_name', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('symptoms', sa.Text(), nullable=True),
        sa.Column('favorable_conditions', sa.Text(), nullable=True),
        sa.Column('prevention_tips', sa.Text(), nullable=True),
        sa.Column('organic_control', sa.Text(), nullable=True),
        sa.Column('chemical_control', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('transmission_method', sa.String(255), nullable=True),
        sa.Column('contagiousness', sa.String(100), nullable=True),
        sa.Column('severity_rating', sa.String(100), nullable=True),
        sa.Column('time_to_onset', sa.String(100), nullable=True),
        sa.Column('recovery_chances', sa.String(100), nullable=True),
        *_timestamps(),

        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plant_diseases_common_name', 'plant_diseases', ['common_name'])


def downgrade() -> None:
    """Drop garden planner tables"""
    op.drop_table('plant_diseases')
    op.drop_table('pests')
    op.drop_table('plant_reminders')
    op.drop_table('image_likes')
    op.drop_table('image_comments')
    op.drop_table('garden_images')
    op.drop_table('plants')
    op.drop_table('garden_plans')
    op.drop_table('plants_library')
    op.drop_table('profiles')
