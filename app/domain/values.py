"""
app/domain/values.py

Explicit "absent" marker for optional record fields.

A field that holds ``UNSET`` was not supplied by the source row. It is
distinct from ``None`` and from the empty string, and it must never reach
the document store: payloads are passed through the sanitizer first.
"""

from __future__ import annotations

import enum
from typing import TypeVar, Union

T = TypeVar("T")


class Unset(enum.Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset.UNSET

Maybe = Union[T, Unset]


def is_unset(value: object) -> bool:
    return value is UNSET
