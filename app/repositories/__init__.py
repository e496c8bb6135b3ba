"""
app/repositories package marker.
"""

from app.repositories.entity_repository import (
    EntityRepository,
    SQLAlchemyEntityRepository,
    ensure_storable,
)

__all__ = [
    "EntityRepository",
    "SQLAlchemyEntityRepository",
    "ensure_storable",
]
