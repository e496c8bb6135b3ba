"""
app/domain/errors.py

Exceptions raised by the CSV import pipeline and its persistence layer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class CSVImportError(Exception):
    """Base exception for CSV import failures."""


class HeaderValidationError(CSVImportError):
    """
    Raised when the header row cannot be accepted.

    This is the only error that aborts an import: no data row is touched.
    """

    def __init__(
        self,
        message: str,
        *,
        missing_fields: Sequence[str] = (),
        missing_labels: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.missing_fields = tuple(missing_fields)
        self.missing_labels = tuple(missing_labels)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "missing_fields": list(self.missing_fields),
            "missing_labels": list(self.missing_labels),
        }


class UnknownEntityKindError(CSVImportError, KeyError):
    """Raised when no import policy is registered for an entity kind."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown entity kind"


class EntityNotFoundError(CSVImportError):
    """Raised when an explicitly referenced entity does not exist."""


class InvalidDocumentValueError(CSVImportError):
    """Raised when a write payload still contains the UNSET marker."""


class PersistenceError(CSVImportError):
    """Raised when the document store fails to read or write."""
