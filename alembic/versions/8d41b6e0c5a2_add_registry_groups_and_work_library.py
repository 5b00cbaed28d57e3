"""add server registry, module groups, manual configurations and quick works

Revision ID: 8d41b6e0c5a2
Revises: 3c9e1a7f2b10
Create Date: 2026-10-19 15:48:07.913554

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import sqlite


# revision identifiers, used by Alembic.
revision: str = '8d41b6e0c5a2'
down_revision: Union[str, None] = '3c9e1a7f2b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


id_type = sa.BigInteger().with_variant(sqlite.INTEGER(), 'sqlite')

CONNECTION_COLUMNS = (
    ('server_id_desktop', 'server_data', 'server_id'),
    ('database_id_desktop', 'database_details', 'database_id'),
    ('server_id_web', 'server_data', 'server_id'),
    ('database_id_web', 'database_details', 'database_id'),
)


def upgrade() -> None:
    # 1. Server and database registry
    op.create_table(
        'server_data',
        sa.Column('server_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('server_name', sa.String(length=200), nullable=False),
        sa.Column('host_name', sa.String(length=200), nullable=False),
        sa.Column('server_index', sa.String(length=50), nullable=False),
    )
    op.create_table(
        'database_details',
        sa.Column('database_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('database_name', sa.String(length=200), nullable=False),
        sa.Column(
            'server_id', sa.Integer(),
            sa.ForeignKey('server_data.server_id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('server_index', sa.String(length=50), nullable=False),
        sa.Column('client_name', sa.String(length=200), nullable=False),
        sa.Column('database_category', sa.String(length=10), nullable=True),
    )
    op.create_index('idx_database_details_server', 'database_details', ['server_id'])

    # 2. Project connection references
    with op.batch_alter_table('projects') as batch_op:
        for column, table, key in CONNECTION_COLUMNS:
            batch_op.add_column(sa.Column(column, sa.Integer(), nullable=True))
            batch_op.create_foreign_key(
                f'fk_projects_{column}', table, [column], [key], ondelete='SET NULL',
            )

    # 3. Field groups
    op.create_table(
        'module_groups',
        sa.Column('module_group_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('module_group_name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('icon_name', sa.String(length=50), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=False),
    )
    op.create_index('idx_module_groups_active_order', 'module_groups', ['is_active', 'display_order'])

    # 4. Manual configuration steps
    op.create_table(
        'manual_configurations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'project_id', id_type,
            sa.ForeignKey('projects.project_id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('module_name', sa.String(length=200), nullable=False),
        sa.Column('sub_module_name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=True),
    )
    op.create_index(
        'idx_manual_configurations_project', 'manual_configurations', ['project_id', 'created_at'],
    )

    # 5. SQL snippet library
    op.create_table(
        'quick_works',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('module_name', sa.String(length=200), nullable=True),
        sa.Column('sub_module_name', sa.String(length=200), nullable=True),
        sa.Column('table_name', sa.String(length=200), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('sql_query', sa.Text(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('quick_works')
    op.drop_index('idx_manual_configurations_project', table_name='manual_configurations')
    op.drop_table('manual_configurations')
    op.drop_index('idx_module_groups_active_order', table_name='module_groups')
    op.drop_table('module_groups')

    with op.batch_alter_table('projects') as batch_op:
        for column, _, _ in reversed(CONNECTION_COLUMNS):
            batch_op.drop_constraint(f'fk_projects_{column}', type_='foreignkey')
            batch_op.drop_column(column)

    op.drop_index('idx_database_details_server', table_name='database_details')
    op.drop_table('database_details')
    op.drop_table('server_data')
