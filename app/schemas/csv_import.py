"""
app/schemas/csv_import.py

Response schemas for CSV import endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.import_result import ImportResult


class RowErrorResponse(BaseModel):
    """
    API response model for one row-level import error.
    """

    model_config = ConfigDict(populate_by_name=True)

    row_number: int = Field(..., ge=1, alias="rowNumber")
    message: str
    column: str | None = None


class ImportResultResponse(BaseModel):
    """
    API response model for a CSV import summary.
    """

    model_config = ConfigDict(populate_by_name=True)

    created_count: int = Field(..., ge=0, alias="createdCount")
    updated_count: int = Field(..., ge=0, alias="updatedCount")
    total_rows: int = Field(..., ge=0, alias="totalRows")
    errors: list[str] = Field(default_factory=list)
    row_errors: list[RowErrorResponse] = Field(default_factory=list, alias="rowErrors")

    @classmethod
    def from_result(cls, result: ImportResult) -> "ImportResultResponse":
        return cls(
            created_count=result.created_count,
            updated_count=result.updated_count,
            total_rows=result.total_rows,
            errors=result.errors,
            row_errors=[
                RowErrorResponse(
                    row_number=error.row_number,
                    message=error.message,
                    column=error.column,
                )
                for error in result.row_errors
            ],
        )
