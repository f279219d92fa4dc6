"""Initial schema: project

Revision ID: 3f1a9c2e7b54
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1a9c2e7b54"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create project table."""
    op.create_table(
        "project",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("architect_name", sa.String(), nullable=True),
        sa.Column("area_sq_ft", sa.Float(), nullable=True),
        sa.Column("location", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("thumbnail_blob", sa.LargeBinary(), nullable=False),
        sa.Column("main_image_url", sa.String(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("model_url", sa.String(), nullable=False),
        sa.Column("youtube_url", sa.String(), nullable=True),
        sa.Column("simulation_video_url", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_project_created_at"), "project", ["created_at"], unique=False
    )


def downgrade() -> None:
    """Drop project table."""
    op.drop_index(op.f("ix_project_created_at"), table_name="project")
    op.drop_table("project")
