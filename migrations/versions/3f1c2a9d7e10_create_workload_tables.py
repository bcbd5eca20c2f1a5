"""create_workload_tables

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-19 09:12:44.318205

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2a9d7e10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Tables may already exist when create_all() ran first
    from sqlalchemy import inspect
    conn = op.get_bind()
    existing_tables = inspect(conn).get_table_names()

    if 'users' not in existing_tables:
        op.create_table(
            'users',
            sa.Column('id', sa.String(length=50), nullable=False),
            sa.Column('name', sa.String(length=100), nullable=True),
            sa.Column('email', sa.String(length=120), nullable=False),
            sa.Column('role', sa.String(length=50), nullable=False),
            sa.Column('team_id', sa.String(length=50), nullable=True),
            sa.Column('weekly_hours', sa.Float(), nullable=False),
            sa.Column('workload_percent', sa.Integer(), nullable=False),
            sa.Column('is_active', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('email')
        )
        op.create_index('idx_users_team', 'users', ['team_id'])
        op.create_index('idx_users_role', 'users', ['role'])

    if 'sub_tasks' not in existing_tables:
        op.create_table(
            'sub_tasks',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('title', sa.String(length=200), nullable=False),
            sa.Column('completed', sa.Boolean(), nullable=False),
            sa.Column('estimated_hours', sa.Float(), nullable=True),
            sa.Column('due_date', sa.Date(), nullable=True),
            sa.Column('assignee_id', sa.String(length=50), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['assignee_id'], ['users.id']),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_sub_tasks_assignee_open', 'sub_tasks', ['assignee_id', 'completed'])
        op.create_index('idx_sub_tasks_due_date', 'sub_tasks', ['due_date'])

    if 'sub_task_assignees' not in existing_tables:
        op.create_table(
            'sub_task_assignees',
            sa.Column('sub_task_id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.String(length=50), nullable=False),
            sa.ForeignKeyConstraint(['sub_task_id'], ['sub_tasks.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('sub_task_id', 'user_id')
        )

    if 'absences' not in existing_tables:
        op.create_table(
            'absences',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('user_id', sa.String(length=50), nullable=False),
            sa.Column('title', sa.String(length=200), nullable=False),
            sa.Column('type', sa.String(length=20), nullable=False),
            sa.Column('start_date', sa.Date(), nullable=False),
            sa.Column('end_date', sa.Date(), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('color', sa.String(length=20), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.CheckConstraint('end_date >= start_date', name='check_absence_date_range'),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('idx_absences_user_dates', 'absences', ['user_id', 'start_date', 'end_date'])


def downgrade():
    op.drop_table('absences')
    op.drop_table('sub_task_assignees')
    op.drop_table('sub_tasks')
    op.drop_table('users')
