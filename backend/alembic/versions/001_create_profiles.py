"""Create profiles table with audit and soft-delete columns.

Revision ID: 001_create_profiles
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_profiles"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(32), nullable=False),
        sa.Column("updated_by", sa.String(32), nullable=True),
        sa.Column("deleted_by", sa.String(32), nullable=True),
        sa.Column("first_name", sa.String(64), nullable=False),
        sa.Column("last_name", sa.String(64), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(64), nullable=False),
        sa.Column("profile_image", sa.Text, nullable=False),
        sa.Column("birth_date", sa.String(64), nullable=False),
        sa.Column("occupation", sa.String(64), nullable=False),
        sa.Column("sex", sa.String(64), nullable=False),
    )
    op.create_index("ix_profiles_deleted_at", "profiles", ["deleted_at"])


def downgrade() -> None:
    op.drop_index("ix_profiles_deleted_at", table_name="profiles")
    op.drop_table("profiles")
