"""Add training plans, sessions, reviews, favorites and goals

Revision ID: 002
Revises: 001
Create Date: 2026-02-10 09:30:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AutoString = sqlmodel.sql.sqltypes.AutoString


def upgrade() -> None:
    op.create_table('training_plans', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', AutoString(length=255), nullable=False),
        sa.Column('type', AutoString(length=100), nullable=False),
        sa.Column('description', AutoString(length=2000), nullable=False),
        sa.Column('difficulty', sa.Integer(), nullable=False),
        sa.Column('state', AutoString(length=20), nullable=False, server_default='active'),
        sa.Column('trainer_id', sa.Integer(), nullable=False),
        sa.Column('location', AutoString(length=255), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('days', AutoString(length=100), nullable=False),
        sa.Column('start', AutoString(length=5), nullable=False),
        sa.Column('end', AutoString(length=5), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['trainer_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_training_plans_type'), 'training_plans', ['type'])
    op.create_index(op.f('ix_training_plans_trainer_id'), 'training_plans', ['trainer_id'])

    op.create_table('user_trainings', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('training_plan_id', sa.Integer(), nullable=False),
        sa.Column('distance', sa.Float(), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('steps', sa.Integer(), nullable=False),
        sa.Column('duration', sa.Interval(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['training_plan_id'], ['training_plans.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_user_trainings_user_id'), 'user_trainings', ['user_id'])
    op.create_index(op.f('ix_user_trainings_training_plan_id'), 'user_trainings', ['training_plan_id'])
    op.create_index(op.f('ix_user_trainings_date'), 'user_trainings', ['date'])

    op.create_table('reviews', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('training_plan_id', sa.Integer(), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('comment', AutoString(length=1000), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['training_plan_id'], ['training_plans.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'training_plan_id', name='uq_review_user_plan'))
    op.create_index(op.f('ix_reviews_user_id'), 'reviews', ['user_id'])
    op.create_index(op.f('ix_reviews_training_plan_id'), 'reviews', ['training_plan_id'])

    op.create_table('favorite_training_plans', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('training_plan_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['training_plan_id'], ['training_plans.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'training_plan_id', name='uq_favorite_user_plan'))
    op.create_index(op.f('ix_favorite_training_plans_user_id'), 'favorite_training_plans', ['user_id'])

    op.create_table('goals', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('title', AutoString(length=255), nullable=False),
        sa.Column('description', AutoString(length=1000), nullable=False),
        sa.Column('type', AutoString(length=20), nullable=False),
        sa.Column('metric', sa.Float(), nullable=False),
        sa.Column('achieved', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('last_achieved', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['athlete_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_goals_athlete_id'), 'goals', ['athlete_id'])


def downgrade() -> None:
    op.drop_index(op.f('ix_goals_athlete_id'), table_name='goals')
    op.drop_table('goals')
    op.drop_index(op.f('ix_favorite_training_plans_user_id'), table_name='favorite_training_plans')
    op.drop_table('favorite_training_plans')
    op.drop_index(op.f('ix_reviews_training_plan_id'), table_name='reviews')
    op.drop_index(op.f('ix_reviews_user_id'), table_name='reviews')
    op.drop_table('reviews')
    op.drop_index(op.f('ix_user_trainings_date'), table_name='user_trainings')
    op.drop_index(op.f('ix_user_trainings_training_plan_id'), table_name='user_trainings')
    op.drop_index(op.f('ix_user_trainings_user_id'), table_name='user_trainings')
    op.drop_table('user_trainings')
    op.drop_index(op.f('ix_training_plans_trainer_id'), table_name='training_plans')
    op.drop_index(op.f('ix_training_plans_type'), table_name='training_plans')
    op.drop_table('training_plans')
