"""
app/mappers package marker.
"""

from app.mappers.header_localizer import HeaderLocalizer, clean_label
from app.mappers.payload_sanitizer import contains_unset, sanitize

__all__ = [
    "clean_label",
    "contains_unset",
    "HeaderLocalizer",
    "sanitize",
]
