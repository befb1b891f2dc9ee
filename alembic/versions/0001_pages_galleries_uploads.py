"""Create pages, galleries and uploads

Revision ID: 0001_pages_galleries_uploads
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_pages_galleries_uploads"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "pages",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("parent_id", sa.Integer(), sa.ForeignKey("pages.id"), nullable=True),
        sa.Column("position", sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_pages_parent_id", "pages", ["parent_id"])

    op.create_table(
        "galleries",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("page_id", sa.Integer(), sa.ForeignKey("pages.id"), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_galleries_page_id", "galleries", ["page_id"])

    op.create_table(
        "uploads",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("kind", sa.String(length=50), nullable=False, server_default="photo"),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("gallery_id", sa.Integer(), sa.ForeignKey("galleries.id"), nullable=True),
        sa.Column("position", sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_uploads_gallery_id", "uploads", ["gallery_id"])


def downgrade() -> None:
    op.drop_index("ix_uploads_gallery_id", table_name="uploads")
    op.drop_table("uploads")
    op.drop_index("ix_galleries_page_id", table_name="galleries")
    op.drop_table("galleries")
    op.drop_index("ix_pages_parent_id", table_name="pages")
    op.drop_table("pages")
