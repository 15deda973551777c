"""Create plant tracker tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create plant tracker tables"""

    # 1. Create users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('supabase_auth_id', sa.String(255), nullable=False),
        sa.Column('username', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('username', name='uq_users_username'),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )
    op.create_index('ix_users_supabase_auth_id', 'users', ['supabase_auth_id'], unique=True)

    # 2. Create plants table
    op.create_table('plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('species', sa.String(255), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('water_frequency', sa.Integer(), nullable=False),
        sa.Column('light_needs', sa.String(20), nullable=False),
        sa.Column('care_notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('last_watered', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_plants'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_plants_user_id_users', ondelete='CASCADE'),
        sa.CheckConstraint('water_frequency >= 1', name='ck_plants_water_frequency_positive'),
        sa.CheckConstraint(
            "light_needs IN ('low', 'medium', 'bright-indirect', 'full-sun')",
            name='ck_plants_light_needs',
        ),
    )
    op.create_index('ix_plants_user_id', 'plants', ['user_id'])

    # 3. Create care_logs table
    op.create_table('care_logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('activity_type', sa.String(20), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('performed_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_care_logs'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], name='fk_care_logs_plant_id_plants', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_care_logs_user_id_users', ondelete='CASCADE'),
        sa.CheckConstraint(
            "activity_type IN ('watering', 'fertilizing', 'pruning', 'repotting', 'misting')",
            name='ck_care_logs_activity_type',
        ),
    )
    op.create_index('ix_care_logs_plant_id', 'care_logs', ['plant_id'])
    op.create_index('ix_care_logs_user_id', 'care_logs', ['user_id'])

    # 4. Create reminders table
    op.create_table('reminders',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('reminder_type', sa.String(20), nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_reminders'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], name='fk_reminders_plant_id_plants', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_reminders_user_id_users', ondelete='CASCADE'),
        sa.CheckConstraint(
            "reminder_type IN ('watering', 'fertilizing', 'pruning', 'repotting', 'other')",
            name='ck_reminders_reminder_type',
        ),
    )
    op.create_index('ix_reminders_plant_id', 'reminders', ['plant_id'])
    op.create_index('ix_reminders_user_due', 'reminders', ['user_id', 'due_date'])

    # 5. Create ai_recommendations table
    op.create_table('ai_recommendations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('read', sa.Boolean(), server_default=sa.false(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_ai_recommendations'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'], name='fk_ai_recommendations_user_id_users', ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['plant_id'], ['plants.id'], name='fk_ai_recommendations_plant_id_plants', ondelete='SET NULL'
        ),
    )
    op.create_index('ix_ai_recommendations_user_id', 'ai_recommendations', ['user_id'])
    op.create_index('ix_ai_recommendations_plant_id', 'ai_recommendations', ['plant_id'])


def downgrade() -> None:
    """Drop plant tracker tables"""

    op.drop_index('ix_ai_recommendations_plant_id', table_name='ai_recommendations')
    op.drop_index('ix_ai_recommendations_user_id', table_name='ai_recommendations')
    op.drop_table('ai_recommendations')

    op.drop_index('ix_reminders_user_due', table_name='reminders')
    op.drop_index('ix_reminders_plant_id', table_name='reminders')
    op.drop_table('reminders')

    op.drop_index('ix_care_logs_user_id', table_name='care_logs')
    op.drop_index('ix_care_logs_plant_id', table_name='care_logs')
    op.drop_table('care_logs')

    op.drop_index('ix_plants_user_id', table_name='plants')
    op.drop_table('plants')

    op.drop_index('ix_users_supabase_auth_id', table_name='users')
    op.drop_table('users')
