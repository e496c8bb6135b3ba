"""
app/mappers/header_localizer.py

Localized header label <-> canonical field name mapping.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.domain.records import ColumnSpec

_BOM = "\ufeff"


def clean_label(label: str) -> str:
    """
    Strip BOM and surrounding whitespace from a raw header cell.
    """

    return (label or "").replace(_BOM, "").strip()


class HeaderLocalizer:
    """
    Translates header rows between localized labels and canonical field names.

    Labels found in the table are substituted; anything else passes through
    verbatim, so files exported with canonical names import unchanged.
    """

    def __init__(self, columns: Sequence[ColumnSpec]) -> None:
        self._label_to_field: dict[str, str] = {}
        self._field_to_label: dict[str, str] = {}
        for spec in columns:
            self._label_to_field[spec.label] = spec.field
            self._field_to_label[spec.field] = spec.label

    def localize(self, labels: Sequence[str]) -> tuple[str, ...]:
        """
        Map one raw header row to canonical field names.
        """

        canonical: list[str] = []
        for label in labels:
            cleaned = clean_label(label)
            canonical.append(self._label_to_field.get(cleaned, cleaned))
        return tuple(canonical)

    def label_for(self, field_name: str) -> str:
        """
        Return the localized label of a canonical field (the field itself if unmapped).
        """

        return self._field_to_label.get(field_name, field_name)

    def labels_for(self, field_names: Sequence[str]) -> tuple[str, ...]:
        return tuple(self.label_for(name) for name in field_names)

    @property
    def header_map(self) -> dict[str, str]:
        return dict(self._label_to_field)
