"""
app/mappers/payload_sanitizer.py

Write-boundary scrub of the UNSET marker.

The document store rejects UNSET anywhere in a payload. ``sanitize`` removes
it at every depth:

- mapping keys whose value is UNSET are dropped;
- nested mappings that end up empty are dropped;
- UNSET list elements are filtered out;
- lists that end up empty are dropped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.values import UNSET


def sanitize(value: Any) -> Any:
    """
    Return a copy of ``value`` with every UNSET removed.
    """

    if isinstance(value, Mapping):
        return _sanitize_mapping(value)
    if isinstance(value, (list, tuple)):
        return _sanitize_sequence(value)
    return value


def contains_unset(value: Any) -> bool:
    """
    Return True when UNSET appears anywhere inside ``value``.
    """

    if value is UNSET:
        return True
    if isinstance(value, Mapping):
        return any(contains_unset(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return any(contains_unset(item) for item in value)
    return False


def _sanitize_mapping(value: Mapping[Any, Any]) -> dict[Any, Any]:
    cleaned: dict[Any, Any] = {}
    for key, item in value.items():
        if item is UNSET:
            continue
        if isinstance(item, Mapping):
            nested = _sanitize_mapping(item)
            if nested:
                cleaned[key] = nested
        elif isinstance(item, (list, tuple)):
            items = _sanitize_sequence(item)
            if items:
                cleaned[key] = items
        else:
            cleaned[key] = item
    return cleaned


def _sanitize_sequence(value: list[Any] | tuple[Any, ...]) -> list[Any]:
    return [sanitize(item) for item in value if item is not UNSET]
