"""Create vault entry tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "vault_entry",
        sa.Column("id", sa.Integer(), nullable=False, autoincrement=True),
        sa.Column("title", sa.String(512), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_vault_entry"),
    )
    op.create_table(
        "vault_entry_tag",
        sa.Column("entry_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(
            ["entry_id"],
            ["vault_entry.id"],
            name="fk_vault_entry_tag_entry_id_vault_entry",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("entry_id", "position", name="pk_vault_entry_tag"),
        sa.UniqueConstraint("entry_id", "name", name="uq_vault_entry_tag_entry_id"),
    )
    op.create_table(
        "vault_entry_link",
        sa.Column("entry_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("url", sa.String(2048), nullable=False),
        sa.ForeignKeyConstraint(
            ["entry_id"],
            ["vault_entry.id"],
            name="fk_vault_entry_link_entry_id_vault_entry",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("entry_id", "position", name="pk_vault_entry_link"),
    )


def downgrade() -> None:
    op.drop_table("vault_entry_link")
    op.drop_table("vault_entry_tag")
    op.drop_table("vault_entry")
