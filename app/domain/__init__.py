"""
app/domain package marker.
"""

from app.domain.entity import Entity
from app.domain.errors import (
    CSVImportError,
    EntityNotFoundError,
    HeaderValidationError,
    InvalidDocumentValueError,
    PersistenceError,
    UnknownEntityKindError,
)
from app.domain.import_policies import POLICIES, EntityImportPolicy, get_policy
from app.domain.import_result import ImportResult, PartnerSyncSummary, RowError
from app.domain.records import ColumnSpec, CompanyRecord, JobRecord, StoreRecord
from app.domain.values import UNSET, Unset, is_unset

__all__ = [
    "ColumnSpec",
    "CompanyRecord",
    "CSVImportError",
    "Entity",
    "EntityImportPolicy",
    "EntityNotFoundError",
    "get_policy",
    "HeaderValidationError",
    "ImportResult",
    "InvalidDocumentValueError",
    "is_unset",
    "JobRecord",
    "PartnerSyncSummary",
    "PersistenceError",
    "POLICIES",
    "RowError",
    "StoreRecord",
    "UnknownEntityKindError",
    "UNSET",
    "Unset",
]
