"""
app/domain/entity.py

Persisted entity as returned by the document store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Entity:
    """
    One stored document. ``id`` and the audit timestamps are assigned by the store.
    """

    id: str
    kind: str
    data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def get(self, field_name: str, default: Any = None) -> Any:
        return self.data.get(field_name, default)
