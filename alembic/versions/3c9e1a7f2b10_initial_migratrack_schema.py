"""initial migratrack schema

Revision ID: 3c9e1a7f2b10
Revises:
Create Date: 2026-10-19 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql, sqlite


# revision identifiers, used by Alembic.
revision: str = '3c9e1a7f2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


id_type = sa.BigInteger().with_variant(sqlite.INTEGER(), 'sqlite')
json_type = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')


def _timestamps():
    return [
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=False),
    ]


def _project_fk():
    return sa.Column(
        'project_id', id_type,
        sa.ForeignKey('projects.project_id', ondelete='CASCADE'),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        'projects',
        sa.Column('project_id', id_type, primary_key=True, autoincrement=True),
        sa.Column('client_name', sa.String(length=200), nullable=False),
        sa.Column('client_code', sa.String(length=50), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('project_type', sa.String(length=100), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('start_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('target_completion_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('actual_completion_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('live_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('project_manager', sa.String(length=200), nullable=True),
        sa.Column('technical_lead', sa.String(length=200), nullable=True),
        sa.Column('budget', sa.Numeric(18, 2), nullable=True),
        sa.Column('implementation_coordinator', sa.String(length=200), nullable=True),
        sa.Column('coordinator_email', sa.String(length=200), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_projects_active_order', 'projects', ['is_active', 'display_order'])

    op.create_table(
        'data_transfer_checks',
        sa.Column('transfer_id', id_type, primary_key=True, autoincrement=True),
        _project_fk(),
        sa.Column('module_name', sa.String(length=200), nullable=False),
        sa.Column('sub_module_name', sa.String(length=200), nullable=True),
        sa.Column('condition', sa.String(length=500), nullable=True),
        sa.Column('table_name_desktop', sa.String(length=200), nullable=False),
        sa.Column('table_name_web', sa.String(length=200), nullable=False),
        sa.Column('record_count_desktop', sa.BigInteger(), nullable=True),
        sa.Column('record_count_web', sa.BigInteger(), nullable=True),
        sa.Column('match_percentage', sa.Numeric(5, 2), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('is_transfer_successful', sa.Boolean(), nullable=False),
        sa.Column('migrated_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('verified_by', sa.String(length=200), nullable=True),
        sa.Column('comments', sa.Text(), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_transfer_checks_project', 'data_transfer_checks', ['project_id'])

    op.create_table(
        'verification_records',
        sa.Column('verification_id', id_type, primary_key=True, autoincrement=True),
        _project_fk(),
        sa.Column('module_name', sa.String(length=200), nullable=False),
        sa.Column('sub_module_name', sa.String(length=200), nullable=True),
        sa.Column('field_name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('sql_query', sa.Text(), nullable=True),
        sa.Column('expected_result', sa.Text(), nullable=True),
        sa.Column('actual_result', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('verified_by', sa.String(length=200), nullable=True),
        sa.Column('verified_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('comments', sa.Text(), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_verification_records_project', 'verification_records', ['project_id'])

    op.create_table(
        'customization_points',
        sa.Column('customization_id', id_type, primary_key=True, autoincrement=True),
        sa.Column('requirement_id', sa.String(length=50), nullable=True),
        _project_fk(),
        sa.Column('module_name', sa.String(length=200), nullable=True),
        sa.Column('sub_module_name', sa.String(length=200), nullable=True),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(length=100), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('is_billable', sa.Boolean(), nullable=False),
        sa.Column('estimated_cost', sa.Numeric(18, 2), nullable=True),
        sa.Column('actual_cost', sa.Numeric(18, 2), nullable=True),
        sa.Column('estimated_hours', sa.Numeric(10, 2), nullable=True),
        sa.Column('actual_hours', sa.Numeric(10, 2), nullable=True),
        sa.Column('priority', sa.String(length=50), nullable=True),
        sa.Column('requested_by', sa.String(length=200), nullable=True),
        sa.Column('approved_by', sa.String(length=200), nullable=True),
        sa.Column('developed_by', sa.String(length=200), nullable=True),
        sa.Column('requested_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('approved_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('completed_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_customization_points_project', 'customization_points', ['project_id'])

    op.create_table(
        'migration_issues',
        sa.Column('issue_id', sa.String(length=50), primary_key=True),
        sa.Column('issue_number', sa.String(length=50), nullable=True),
        _project_fk(),
        sa.Column('module_name', sa.String(length=200), nullable=True),
        sa.Column('sub_module_name', sa.String(length=200), nullable=True),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('root_cause', sa.Text(), nullable=True),
        sa.Column('solution', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('priority', sa.String(length=50), nullable=False),
        sa.Column('severity', sa.String(length=50), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('assigned_to', sa.String(length=200), nullable=True),
        sa.Column('reported_by', sa.String(length=200), nullable=True),
        sa.Column('reported_date', sa.TIMESTAMP(), nullable=False),
        sa.Column('resolved_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('closed_date', sa.TIMESTAMP(), nullable=True),
        sa.Column('estimated_hours', sa.Numeric(10, 2), nullable=True),
        sa.Column('actual_hours', sa.Numeric(10, 2), nullable=True),
        sa.Column('remarks', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_migration_issues_project', 'migration_issues', ['project_id'])
    op.create_index('idx_migration_issues_status', 'migration_issues', ['project_id', 'status'])

    op.create_table(
        'field_master',
        sa.Column('field_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('field_name', sa.String(length=100), nullable=False),
        sa.Column('field_label', sa.String(length=200), nullable=False),
        sa.Column('field_description', sa.String(length=500), nullable=True),
        sa.Column('module_group_id', sa.Integer(), nullable=False),
        sa.Column('data_type', sa.String(length=50), nullable=False),
        sa.Column('max_length', sa.Integer(), nullable=True),
        sa.Column('default_value', sa.String(length=500), nullable=True),
        sa.Column('select_query_db', sa.Text(), nullable=True),
        sa.Column('is_required', sa.Boolean(), nullable=False),
        sa.Column('is_unique', sa.Boolean(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('validation_regex', sa.String(length=500), nullable=True),
        sa.Column('placeholder_text', sa.String(length=200), nullable=True),
        sa.Column('help_text', sa.String(length=500), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_field_master_group', 'field_master', ['module_group_id', 'display_order'])

    op.create_table(
        'lookup_data',
        sa.Column('lookup_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('lookup_type', sa.String(length=100), nullable=False),
        sa.Column('lookup_key', sa.String(length=100), nullable=False),
        sa.Column('lookup_value', sa.String(length=500), nullable=False),
        sa.Column(
            'parent_lookup_id', sa.Integer(),
            sa.ForeignKey('lookup_data.lookup_id', ondelete='SET NULL'),
            nullable=True,
        ),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
    )
    op.create_index('idx_lookup_data_type', 'lookup_data', ['lookup_type', 'display_order'])

    op.create_table(
        'dynamic_module_data',
        sa.Column('record_id', sa.String(length=50), primary_key=True),
        _project_fk(),
        sa.Column('module_group_id', sa.Integer(), nullable=False),
        sa.Column('data', json_type, nullable=False),
        sa.Column('status', sa.String(length=50), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('is_deleted', sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        'idx_module_data_project_group', 'dynamic_module_data', ['project_id', 'module_group_id']
    )

    op.create_table(
        'module_master',
        sa.Column('module_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('module_name', sa.String(length=200), nullable=False),
        sa.Column('sub_module_name', sa.String(length=200), nullable=False),
        sa.Column('group_index', sa.Integer(), nullable=True),
    )

    op.create_table(
        'web_tables',
        sa.Column('web_table_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('table_name', sa.String(length=200), nullable=False),
        sa.Column('desktop_table_name', sa.String(length=200), nullable=True),
        sa.Column('module_name', sa.String(length=200), nullable=True),
        sa.Column('group_index', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
    )

    op.create_table(
        'project_emails',
        sa.Column('email_id', sa.Integer(), primary_key=True, autoincrement=True),
        _project_fk(),
        sa.Column('subject', sa.String(length=500), nullable=False),
        sa.Column('sender', sa.String(length=200), nullable=True),
        sa.Column('receivers', sa.String(length=500), nullable=True),
        sa.Column('email_date', sa.TIMESTAMP(), nullable=False),
        sa.Column('body_content', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('attachment_path', sa.String(length=1000), nullable=True),
        sa.Column('related_module', sa.String(length=100), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_project_emails_project', 'project_emails', ['project_id', 'email_date'])

    op.create_table(
        'excel_data',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        _project_fk(),
        sa.Column('module_name', sa.String(length=200), nullable=False),
        sa.Column('sub_module_name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('file_path', sa.String(length=500), nullable=False),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('uploaded_by', sa.Integer(), nullable=True),
        sa.Column('uploaded_at', sa.TIMESTAMP(), nullable=False),
    )
    op.create_index('idx_excel_data_project', 'excel_data', ['project_id', 'uploaded_at'])


def downgrade() -> None:
    op.drop_index('idx_excel_data_project', table_name='excel_data')
    op.drop_table('excel_data')
    op.drop_index('idx_project_emails_project', table_name='project_emails')
    op.drop_table('project_emails')
    op.drop_table('web_tables')
    op.drop_table('module_master')
    op.drop_index('idx_module_data_project_group', table_name='dynamic_module_data')
    op.drop_table('dynamic_module_data')
    op.drop_index('idx_lookup_data_type', table_name='lookup_data')
    op.drop_table('lookup_data')
    op.drop_index('idx_field_master_group', table_name='field_master')
    op.drop_table('field_master')
    op.drop_index('idx_migration_issues_status', table_name='migration_issues')
    op.drop_index('idx_migration_issues_project', table_name='migration_issues')
    op.drop_table('migration_issues')
    op.drop_index('idx_customization_points_project', table_name='customization_points')
    op.drop_table('customization_points')
    op.drop_index('idx_verification_records_project', table_name='verification_records')
    op.drop_table('verification_records')
    op.drop_index('idx_transfer_checks_project', table_name='data_transfer_checks')
    op.drop_table('data_transfer_checks')
    op.drop_table('projects')
