"""add framework-aware priority_data and framework_id to project_briefs

Revision ID: 20261016_brief_priority_data
Revises: 20261015_brief_tables
Create Date: 2026-10-16

Existing 1-5 priorities are backfilled as {"value": priority} under the
"simple" framework. The legacy `priority` column is kept as the sort key.
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "20261016_brief_priority_data"
down_revision = "20261015_brief_tables"
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table("project_briefs") as batch_op:
        batch_op.add_column(
            sa.Column(
                "priority_data",
                sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
                nullable=True,
            )
        )
        batch_op.add_column(
            sa.Column("framework_id", sa.String(length=50), nullable=False, server_default="simple")
        )
    op.create_index("ix_project_briefs_framework_id", "project_briefs", ["framework_id"])

    conn = op.get_bind()
    build_object = "jsonb_build_object" if conn.dialect.name == "postgresql" else "json_object"
    op.execute(
        f"UPDATE project_briefs SET priority_data = {build_object}('value', priority) "
        "WHERE priority IS NOT NULL AND priority_data IS NULL"
    )


def downgrade():
    op.drop_index("ix_project_briefs_framework_id", table_name="project_briefs")
    with op.batch_alter_table("project_briefs") as batch_op:
        batch_op.drop_column("framework_id")
        batch_op.drop_column("priority_data")
