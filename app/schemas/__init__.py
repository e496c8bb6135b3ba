"""
app/schemas package marker.
"""

from app.schemas.csv_import import ImportResultResponse, RowErrorResponse

__all__ = [
    "ImportResultResponse",
    "RowErrorResponse",
]
