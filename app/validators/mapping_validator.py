"""
app/validators/mapping_validator.py

Validation of localized header rows against the required canonical fields.
"""

from __future__ import annotations

from typing import Sequence

from app.domain.errors import HeaderValidationError
from app.mappers.header_localizer import HeaderLocalizer


class MappingValidator:
    """
    Validates that a canonical header row carries every required field.
    """

    def __init__(
        self,
        *,
        required_fields: Sequence[str],
        localizer: HeaderLocalizer,
    ) -> None:
        self._required_fields = tuple(required_fields)
        self._localizer = localizer

    def validate(self, *, headers: Sequence[str]) -> None:
        """
        Raise HeaderValidationError naming every missing required column.

        Missing columns are reported by their localized label, in field
        declaration order.
        """

        present = set(headers)
        missing = [name for name in self._required_fields if name not in present]
        if not missing:
            return

        labels = self._localizer.labels_for(missing)
        raise HeaderValidationError(
            f"missing required columns: {', '.join(labels)}",
            missing_fields=missing,
            missing_labels=labels,
        )
