"""
db/models/entity_document.py

Schemaless back-office document (company, store or job) stored as JSONB.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import Index, String
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base, TimestampMixin


class EntityKind:
    COMPANIES = "companies"
    STORES = "stores"
    JOBS = "jobs"


class EntityDocument(Base, TimestampMixin):
    __tablename__ = "entity_documents"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    kind: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="companies, stores, jobs",
    )
    data: Mapped[dict[str, Any]] = mapped_column(
        JSONB,
        nullable=False,
        default=dict,
        comment="Document fields keyed by canonical field name",
    )
    external_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Partner HR system identifier, denormalized from data",
    )

    __table_args__ = (
        Index("ix_entity_documents_kind", "kind"),
        Index("ix_entity_documents_kind_external_id", "kind", "external_id"),
        Index("ix_entity_documents_created_at", "created_at"),
    )
