"""Create submissions and members

Revision ID: 3f9c2a7d1e04
Revises:
Create Date: 2026-10-19 10:12:44.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1e04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "submissions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("reg_number", sa.VARCHAR(length=9), nullable=False),
        sa.Column("domain", sa.VARCHAR(), nullable=False),
        sa.Column("personal_info", sa.JSON(), nullable=False),
        sa.Column("journey", sa.JSON(), nullable=False),
        sa.Column("team_bonding", sa.JSON(), nullable=False),
        sa.Column("future", sa.JSON(), nullable=True),
        sa.Column("status", sa.VARCHAR(), nullable=False, server_default="submitted"),
        sa.Column("reviewed_by", sa.VARCHAR(length=100), nullable=True),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("notes", sa.VARCHAR(length=1000), nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # Unique index is the authoritative guard against duplicate registrations
    op.create_index(
        op.f("ix_submissions_reg_number"), "submissions", ["reg_number"], unique=True
    )
    op.create_index(op.f("ix_submissions_domain"), "submissions", ["domain"])
    op.create_index(op.f("ix_submissions_status"), "submissions", ["status"])
    op.create_index(
        op.f("ix_submissions_submitted_at"), "submissions", ["submitted_at"]
    )

    op.create_table(
        "members",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("reg_number", sa.VARCHAR(length=9), nullable=False),
        sa.Column("name", sa.VARCHAR(length=100), nullable=False),
        sa.Column("email", sa.VARCHAR(), nullable=False),
        sa.Column("phone_number", sa.VARCHAR(), nullable=False),
        sa.Column("quirky_detail", sa.VARCHAR(length=500), nullable=False),
        sa.Column("birthdate", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_members_reg_number"), "members", ["reg_number"], unique=True
    )
    op.create_index(op.f("ix_members_created_at"), "members", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_members_created_at"), table_name="members")
    op.drop_index(op.f("ix_members_reg_number"), table_name="members")
    op.drop_table("members")
    op.drop_index(op.f("ix_submissions_submitted_at"), table_name="submissions")
    op.drop_index(op.f("ix_submissions_status"), table_name="submissions")
    op.drop_index(op.f("ix_submissions_domain"), table_name="submissions")
    op.drop_index(op.f("ix_submissions_reg_number"), table_name="submissions")
    op.drop_table("submissions")
