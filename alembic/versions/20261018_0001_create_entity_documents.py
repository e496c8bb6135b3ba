"""create entity_documents table

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 10:00:00
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "entity_documents",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("kind", sa.String(length=32), nullable=False),
        sa.Column("data", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("external_id", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_entity_documents_kind", "entity_documents", ["kind"], unique=False)
    op.create_index(
        "ix_entity_documents_kind_external_id",
        "entity_documents",
        ["kind", "external_id"],
        unique=False,
    )
    op.create_index("ix_entity_documents_created_at", "entity_documents", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_entity_documents_created_at", table_name="entity_documents")
    op.drop_index("ix_entity_documents_kind_external_id", table_name="entity_documents")
    op.drop_index("ix_entity_documents_kind", table_name="entity_documents")
    op.drop_table("entity_documents")
