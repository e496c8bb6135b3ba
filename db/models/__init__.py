"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.entity_document import EntityDocument, EntityKind

__all__ = [
    "EntityDocument",
    "EntityKind",
]
