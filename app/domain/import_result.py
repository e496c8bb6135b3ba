"""
app/domain/import_result.py

Row errors and end-of-run summaries produced by the import pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RowError:
    """
    One row-scoped failure. ``row_number`` is 1-based with the header as row 1.
    """

    row_number: int
    message: str
    column: str | None = None

    def __str__(self) -> str:
        return f"row {self.row_number}: {self.message}"


@dataclass(frozen=True)
class ImportResult:
    """
    End-of-run import summary.

    Every data row is accounted for exactly once:
    ``created_count + updated_count + failed_count == total_rows``.
    """

    created_count: int = 0
    updated_count: int = 0
    total_rows: int = 0
    row_errors: list[RowError] = field(default_factory=list)

    @property
    def errors(self) -> list[str]:
        return [str(error) for error in self.row_errors]

    @property
    def failed_count(self) -> int:
        return len({error.row_number for error in self.row_errors})


@dataclass(frozen=True)
class PartnerSyncSummary:
    """
    Summary of applying partner-system company records.
    """

    created: int = 0
    updated: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)
