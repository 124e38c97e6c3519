"""Initial content platform schema.

Creates:
- accounts (roles, soft delete)
- posts, magazines, tea_ratings (authored content, soft delete)
- locations, employment_types (job posting taxonomies)
- job_postings (authored content, soft delete)

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    """Create all tables."""

    # -------------------------------------------------------------------------
    # 1. accounts
    # -------------------------------------------------------------------------
    op.create_table(
        'accounts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=16), nullable=False, server_default='USER'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', name='uq_accounts_name'),
        sa.UniqueConstraint('email', name='uq_accounts_email'),
    )
    op.create_index('ix_accounts_email', 'accounts', ['email'], unique=False)
    op.create_index('ix_accounts_deleted_at', 'accounts', ['deleted_at'], unique=False)

    # -------------------------------------------------------------------------
    # 2. posts / magazines
    # -------------------------------------------------------------------------
    for table in ('posts', 'magazines'):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('author_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=200), nullable=False),
            sa.Column('detail', sa.Text(), nullable=False),
            sa.Column('category', sa.String(length=64), nullable=True),
            sa.Column('tags', sa.JSON(), nullable=True),
            sa.Column('image_url', sa.Text(), nullable=True),
            sa.Column('status', sa.String(length=16), nullable=False, server_default='draft'),
            sa.Column('like_count', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('view_count', sa.Integer(), nullable=False, server_default='0'),
            *_timestamps(),
            sa.ForeignKeyConstraint(['author_id'], ['accounts.id']),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(f'ix_{table}_author_id', table, ['author_id'], unique=False)
        op.create_index(f'ix_{table}_deleted_at', table, ['deleted_at'], unique=False)

    # -------------------------------------------------------------------------
    # 3. tea_ratings
    # -------------------------------------------------------------------------
    op.create_table(
        'tea_ratings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('review', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='active'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['author_id'], ['accounts.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tea_ratings_author_id', 'tea_ratings', ['author_id'], unique=False)
    op.create_index('ix_tea_ratings_deleted_at', 'tea_ratings', ['deleted_at'], unique=False)

    # -------------------------------------------------------------------------
    # 4. taxonomies
    # -------------------------------------------------------------------------
    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', name='uq_locations_name'),
    )
    op.create_table(
        'employment_types',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name', name='uq_employment_types_name'),
    )

    # -------------------------------------------------------------------------
    # 5. job_postings
    # -------------------------------------------------------------------------
    op.create_table(
        'job_postings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.Column('employment_type_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('company_name', sa.String(length=100), nullable=False),
        sa.Column('detail_location', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('recruitment_start_date', sa.Date(), nullable=False),
        sa.Column('recruitment_end_date', sa.Date(), nullable=False),
        sa.Column('job_title', sa.String(length=50), nullable=False),
        sa.Column('annual_salary', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('preferred_skills', sa.JSON(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('contact_info', sa.String(length=50), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='active'),
        sa.Column('view_count', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['author_id'], ['accounts.id']),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.ForeignKeyConstraint(['employment_type_id'], ['employment_types.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_job_postings_author_id', 'job_postings', ['author_id'], unique=False)
    op.create_index('ix_job_postings_location_id', 'job_postings', ['location_id'], unique=False)
    op.create_index('ix_job_postings_employment_type_id', 'job_postings', ['employment_type_id'], unique=False)
    op.create_index('ix_job_postings_status', 'job_postings', ['status'], unique=False)
    op.create_index('ix_job_postings_created_at', 'job_postings', ['created_at'], unique=False)
    op.create_index('ix_job_postings_deleted_at', 'job_postings', ['deleted_at'], unique=False)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('job_postings')
    op.drop_table('employment_types')
    op.drop_table('locations')
    op.drop_table('tea_ratings')
    op.drop_table('magazines')
    op.drop_table('posts')
    op.drop_table('accounts')
