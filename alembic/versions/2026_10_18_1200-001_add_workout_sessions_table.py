"""Add workout_sessions table

Revision ID: 001
Revises:
Create Date: 2026-10-18 12:00:00.000000

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

session_status = sa.Enum('NOT_STARTED', 'PARTIALLY_COMPLETED', 'FULLY_COMPLETED', name='sessionstatus')


def upgrade() -> None:
    """Create workout_sessions table."""
    op.create_table('workout_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('program_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=True),
        sa.Column('program_assignment_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=True),
        sa.Column('workout_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=True),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('week_number', sa.Integer(), nullable=True),
        sa.Column('day_number', sa.Integer(), nullable=True),
        sa.Column('status', session_status, nullable=False, server_default='NOT_STARTED'),
        sa.Column('total_items', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('completed_items', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('completion_percentage', sa.Float(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'date', name='uq_workout_session_athlete_date'))
    op.create_index(op.f('ix_workout_sessions_athlete_id'), 'workout_sessions', ['athlete_id'], unique=False)
    op.create_index(op.f('ix_workout_sessions_date'), 'workout_sessions', ['date'], unique=False)
    op.create_index(op.f('ix_workout_sessions_program_id'), 'workout_sessions', ['program_id'], unique=False)
    op.create_index(op.f('ix_workout_sessions_program_assignment_id'), 'workout_sessions',
                    ['program_assignment_id'], unique=False)


def downgrade() -> None:
    """Drop workout_sessions table."""
    op.drop_index(op.f('ix_workout_sessions_program_assignment_id'), table_name='workout_sessions')
    op.drop_index(op.f('ix_workout_sessions_program_id'), table_name='workout_sessions')
    op.drop_index(op.f('ix_workout_sessions_date'), table_name='workout_sessions')
    op.drop_index(op.f('ix_workout_sessions_athlete_id'), table_name='workout_sessions')
    op.drop_table('workout_sessions')
    session_status.drop(op.get_bind(), checkfirst=True)
