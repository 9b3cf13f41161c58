"""Create files and folders tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "folders",
        sa.Column("seq", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("uploader_name", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        "files",
        sa.Column("seq", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("original_name", sa.String(), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("mime_type", sa.String(), nullable=False),
        sa.Column("storage_path", sa.String(), nullable=False),
        sa.Column("public_url", sa.String(), nullable=False),
        sa.Column("download_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("uploader_name", sa.String(), nullable=True),
        sa.Column("secret_code", sa.String(), nullable=True),
        sa.Column("folder_id", sa.String(), nullable=True),
    )
    op.create_index("ix_folders_id", "folders", ["id"], unique=True)
    op.create_index("ix_files_id", "files", ["id"], unique=True)
    op.create_index("ix_files_created_at", "files", ["created_at"])
    op.create_index("ix_files_uploader_name", "files", ["uploader_name"])
    op.create_index("ix_files_secret_code", "files", ["secret_code"])
    op.create_index("ix_files_folder_id", "files", ["folder_id"])


def downgrade():
    op.drop_table("files")
    op.drop_table("folders")
