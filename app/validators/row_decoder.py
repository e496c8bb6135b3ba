"""
app/validators/row_decoder.py

Row-level coercion and validation of tokenized CSV rows into candidate records.
"""

from __future__ import annotations

from typing import Any, Sequence

from app.domain.import_policies import EntityImportPolicy
from app.domain.import_result import RowError
from app.domain.records import BOOL, ENUM, INT, LIST, ColumnSpec, build_record
from app.domain.values import UNSET

TRUE_TOKENS = {"true", "1"}
LIST_SEPARATOR = ";"


class RowDecoder:
    """
    Decodes one raw row into the policy's record type.

    Optional cells that are empty or unparsable become UNSET. Only a missing
    required value or an out-of-range enumerated value fails the row.
    """

    def __init__(self, policy: EntityImportPolicy) -> None:
        self._policy = policy
        self._columns: dict[str, ColumnSpec] = {spec.field: spec for spec in policy.columns}

    def decode(
        self,
        *,
        headers: Sequence[str],
        cells: Sequence[str],
        row_number: int,
    ) -> tuple[Any | None, RowError | None]:
        """
        Return ``(record, None)`` on success or ``(None, error)`` on failure.
        """

        raw = self.align(headers=headers, cells=cells)

        for spec in self._policy.columns:
            if spec.required and self._is_blank(raw.get(spec.field)):
                return None, RowError(
                    row_number=row_number,
                    column=spec.field,
                    message=f"{spec.field} is required",
                )

        values: dict[str, Any] = {}
        for name, cell in raw.items():
            spec = self._columns.get(name)
            if spec is None:
                continue
            value = self._coerce(spec, cell)
            if spec.kind == ENUM and value is not UNSET and value not in spec.choices:
                return None, RowError(
                    row_number=row_number,
                    column=spec.field,
                    message=f"invalid {spec.field}",
                )
            values[name] = value

        return build_record(self._policy.record_type, values), None

    @staticmethod
    def align(*, headers: Sequence[str], cells: Sequence[str]) -> dict[str, str]:
        """
        Zip headers to cells, padding short rows with "" and truncating long ones.
        """

        padded = list(cells[: len(headers)])
        padded.extend([""] * (len(headers) - len(padded)))
        return dict(zip(headers, padded))

    def _coerce(self, spec: ColumnSpec, cell: str | None) -> Any:
        if self._is_blank(cell):
            return UNSET

        text = str(cell).strip()
        if spec.kind == INT:
            return self._parse_int(text)
        if spec.kind == BOOL:
            return text in TRUE_TOKENS
        if spec.kind == LIST:
            items = [item.strip() for item in text.split(LIST_SEPARATOR)]
            items = [item for item in items if item]
            return items or UNSET
        return text

    @staticmethod
    def _parse_int(text: str) -> Any:
        try:
            return int(text)
        except ValueError:
            return UNSET

    @staticmethod
    def _is_blank(value: Any) -> bool:
        return value is None or not str(value).strip()
