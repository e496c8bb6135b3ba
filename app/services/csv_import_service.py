"""
app/services/csv_import_service.py

Service layer for back-office CSV imports.

One engine serves every entity kind; the kind-specific parts (columns,
required fields, match keys, create defaults) come from an EntityImportPolicy.

Flow per file:

    tokenize -> localize headers -> validate headers
    for each data row, in source order:
        decode -> reconcile -> sanitize -> create / update

A header failure aborts the import before any row is touched. Every other
failure is scoped to its row: it is recorded as ``row <n>: <message>`` and
the next row is processed.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.config import get_csv_import_settings
from app.domain.errors import HeaderValidationError
from app.domain.import_policies import EntityImportPolicy
from app.domain.import_result import ImportResult, RowError
from app.mappers.header_localizer import HeaderLocalizer
from app.mappers.payload_sanitizer import sanitize
from app.parsers.csv_tokenizer import tokenize
from app.repositories.entity_repository import EntityRepository
from app.services.reconciler import RecordReconciler
from app.validators.mapping_validator import MappingValidator
from app.validators.row_decoder import RowDecoder

logger = logging.getLogger(__name__)

# The header occupies row 1, so the first data row is row 2.
FIRST_DATA_ROW_NUMBER = 2


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class CSVImportService:
    """
    Coordinates tokenizing, header mapping, row decoding, reconciliation and writes.
    """

    def __init__(self, *, log_row_errors: bool = True) -> None:
        self._log_row_errors = log_row_errors

    def import_csv(
        self,
        *,
        text: str,
        policy: EntityImportPolicy,
        repository: EntityRepository,
    ) -> ImportResult:
        """
        Import one CSV document for the policy's entity kind.

        Raises HeaderValidationError when the header row is missing or lacks a
        required column. All row-level failures are reported in the result.
        """

        rows = tokenize(text)
        if not rows:
            raise HeaderValidationError("CSV header row is missing.")

        localizer = HeaderLocalizer(policy.columns)
        headers = localizer.localize(rows[0])
        MappingValidator(
            required_fields=policy.required_fields,
            localizer=localizer,
        ).validate(headers=headers)

        decoder = RowDecoder(policy)
        reconciler = RecordReconciler(policy, repository)

        created = 0
        updated = 0
        row_errors: list[RowError] = []
        data_rows = rows[1:]

        for row_number, cells in enumerate(data_rows, start=FIRST_DATA_ROW_NUMBER):
            try:
                record, error = decoder.decode(headers=headers, cells=cells, row_number=row_number)
                if error is not None:
                    self._record_error(row_errors, error)
                    continue

                resolution = reconciler.reconcile(record)
                payload = sanitize(resolution.payload)
                if resolution.is_create:
                    repository.create(payload)
                    created += 1
                else:
                    repository.update(resolution.entity_id, payload)
                    updated += 1
            except Exception as exc:  # noqa: BLE001
                self._record_error(
                    row_errors,
                    RowError(row_number=row_number, message=str(exc)),
                )

        result = ImportResult(
            created_count=created,
            updated_count=updated,
            total_rows=len(data_rows),
            row_errors=row_errors,
        )
        logger.info(
            "CSV import finished kind=%s total_rows=%s created=%s updated=%s failed=%s",
            policy.kind,
            result.total_rows,
            result.created_count,
            result.updated_count,
            result.failed_count,
        )
        return result

    def _record_error(self, row_errors: list[RowError], error: RowError) -> None:
        if self._log_row_errors:
            logger.warning(
                "CSV import row error row=%s column=%s message=%s",
                error.row_number,
                error.column,
                error.message,
            )
        row_errors.append(error)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_csv_import_service() -> CSVImportService:
    """
    Build and cache the import service with env-driven settings.
    """
    settings = get_csv_import_settings()
    return CSVImportService(log_row_errors=settings.log_row_errors)
