"""Create record-store tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AutoString = sqlmodel.sql.sqltypes.AutoString


def _timestamp(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)'))


def upgrade() -> None:
    """Create athletes, loads, injuries, wellness, testing and threshold tables."""
    op.create_table('athletes', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', AutoString(length=255), nullable=False),
        sa.Column('status', AutoString(length=20), nullable=False, server_default='active'),
        sa.Column('sport_id', AutoString(length=50), nullable=True),
        _timestamp('created_at'), _timestamp('updated_at'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_athletes_name'), 'athletes', ['name'])

    op.create_table('daily_loads', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('rpe', sa.Integer(), nullable=False),
        sa.Column('duration_minutes', sa.Float(), nullable=False),
        sa.Column('training_load', sa.Float(), nullable=False),
        sa.Column('session_type', AutoString(length=50), nullable=False, server_default=''),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['athlete_id'], ['athletes.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_daily_loads_athlete_id'), 'daily_loads', ['athlete_id'])
    op.create_index(op.f('ix_daily_loads_date'), 'daily_loads', ['date'])

    op.create_table('injuries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('type', AutoString(length=20), nullable=False, server_default='injury'),
        sa.Column('body_region', AutoString(length=100), nullable=True),
        sa.Column('status', AutoString(length=20), nullable=False, server_default='active'),
        sa.Column('date_occurred', sa.Date(), nullable=False),
        sa.Column('date_resolved', sa.Date(), nullable=True),
        sa.Column('days_lost', sa.Integer(), nullable=True),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        _timestamp('created_at'), _timestamp('updated_at'),
        sa.ForeignKeyConstraint(['athlete_id'], ['athletes.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_injuries_athlete_id'), 'injuries', ['athlete_id'])
    op.create_index(op.f('ix_injuries_status'), 'injuries', ['status'])

    op.create_table('wellness_checkins', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('sleep_hours', sa.Float(), nullable=False, server_default='0'),
        sa.Column('sleep_quality', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('soreness', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('fatigue', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('mood', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('hydration', sa.Integer(), nullable=False, server_default='3'),
        sa.Column('readiness_score', sa.Float(), nullable=False),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['athlete_id'], ['athletes.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'date', name='uq_wellness_athlete_date'))
    op.create_index(op.f('ix_wellness_checkins_athlete_id'), 'wellness_checkins', ['athlete_id'])
    op.create_index(op.f('ix_wellness_checkins_date'), 'wellness_checkins', ['date'])

    op.create_table('metrics', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', AutoString(length=100), nullable=False),
        sa.Column('unit', AutoString(length=20), nullable=False, server_default=''),
        sa.Column('best_score_method', AutoString(length=10), nullable=False, server_default='highest'),
        sa.Column('sport_id', AutoString(length=50), nullable=True),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_metrics_sport_id'), 'metrics', ['sport_id'])

    op.create_table('testing_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['athlete_id'], ['athletes.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_testing_sessions_athlete_id'), 'testing_sessions', ['athlete_id'])
    op.create_index(op.f('ix_testing_sessions_date'), 'testing_sessions', ['date'])

    op.create_table('trial_results', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('session_id', sa.Integer(), nullable=False),
        sa.Column('metric_id', sa.Integer(), nullable=False),
        sa.Column('best_score', sa.Float(), nullable=True),
        sa.Column('average_score', sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(['session_id'], ['testing_sessions.id']),
        sa.ForeignKeyConstraint(['metric_id'], ['metrics.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('session_id', 'metric_id', name='uq_trial_session_metric'))
    op.create_index(op.f('ix_trial_results_session_id'), 'trial_results', ['session_id'])
    op.create_index(op.f('ix_trial_results_metric_id'), 'trial_results', ['metric_id'])

    op.create_table('threshold_settings', sa.Column('key', AutoString(length=50), nullable=False),
        sa.Column('value', AutoString(length=50), nullable=False),
        _timestamp('updated_at'),
        sa.PrimaryKeyConstraint('key'))


def downgrade() -> None:
    """Drop every record-store table (children first)."""
    op.drop_table('threshold_settings')
    op.drop_table('trial_results')
    op.drop_table('testing_sessions')
    op.drop_table('metrics')
    op.drop_table('wellness_checkins')
    op.drop_table('injuries')
    op.drop_table('daily_loads')
    op.drop_table('athletes')
