"""create organizations and project_briefs (1-5 priority scale)

Revision ID: 20261015_brief_tables
Revises:
Create Date: 2026-10-15

Databases that already hold these tables should be stamped at this
revision (`alembic stamp 20261015_brief_tables`) rather than upgraded.
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "20261015_brief_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "organizations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "document_settings",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=True,
        ),
    )
    op.create_table(
        "project_briefs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("org_id", sa.Integer(), sa.ForeignKey("organizations.id"), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("summary_md", sa.Text(), nullable=True),
        sa.Column("review_status", sa.String(length=20), nullable=False, server_default="pending"),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reviewed_by", sa.String(length=255), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=True),
    )
    op.create_index("ix_project_briefs_org_id", "project_briefs", ["org_id"])
    op.create_index("ix_project_briefs_review_status", "project_briefs", ["review_status"])


def downgrade():
    op.drop_index("ix_project_briefs_review_status", table_name="project_briefs")
    op.drop_index("ix_project_briefs_org_id", table_name="project_briefs")
    op.drop_table("project_briefs")
    op.drop_table("organizations")
