"""
app/validators package marker.
"""

from app.validators.mapping_validator import MappingValidator
from app.validators.row_decoder import RowDecoder

__all__ = [
    "MappingValidator",
    "RowDecoder",
]
