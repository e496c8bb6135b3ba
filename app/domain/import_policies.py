"""
app/domain/import_policies.py

Per-entity-kind policy bundles for the generic CSV import engine.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app.domain.errors import UnknownEntityKindError
from app.domain.records import (
    ColumnSpec,
    CompanyRecord,
    JobRecord,
    StoreRecord,
    record_columns,
    record_values,
)
from app.domain.values import UNSET


@dataclass(frozen=True)
class EntityImportPolicy:
    """
    Everything the engine needs to know about one entity kind.

    Column metadata comes from ``record_type``; matching is configured by the
    local id field, the optional external-system id field and the natural key.
    """

    kind: str
    entity_label: str
    record_type: type
    natural_key_fields: tuple[str, ...]
    display_field: str
    local_id_field: str = "id"
    external_id_field: str | None = None
    import_timestamp_field: str | None = None
    create_defaults: Mapping[str, Any] = field(default_factory=dict)

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return record_columns(self.record_type)

    @property
    def required_fields(self) -> tuple[str, ...]:
        return tuple(spec.field for spec in self.columns if spec.required)

    @property
    def carried_fields(self) -> tuple[str, ...]:
        """Fields an update never clears by omission."""
        return tuple(
            name
            for name in (self.external_id_field, self.import_timestamp_field)
            if name is not None
        )

    def payload_of(self, record: Any) -> dict[str, Any]:
        """
        Return the write payload of a record: every column except the local id.
        """

        values = record_values(record)
        values.pop(self.local_id_field, None)
        return values

    def local_id_of(self, record: Any) -> str | None:
        return _text_or_none(record_values(record).get(self.local_id_field, UNSET))

    def external_id_of(self, record: Any) -> str | None:
        if self.external_id_field is None:
            return None
        return _text_or_none(record_values(record).get(self.external_id_field, UNSET))

    def natural_key_of(self, record: Any) -> dict[str, str]:
        """
        Return the natural key of a record. Absent components compare as "".
        """

        values = record_values(record)
        key: dict[str, str] = {}
        for name in self.natural_key_fields:
            value = values.get(name, UNSET)
            key[name] = "" if value is UNSET or value is None else str(value)
        return key

    def display_name_of(self, values: Mapping[str, Any]) -> str:
        value = values.get(self.display_field)
        if value is UNSET or value is None:
            return ""
        return str(value)


def _text_or_none(value: Any) -> str | None:
    if value is UNSET or value is None:
        return None
    text = str(value).strip()
    return text or None


COMPANY_POLICY = EntityImportPolicy(
    kind="companies",
    entity_label="company",
    record_type=CompanyRecord,
    natural_key_fields=("name", "address"),
    display_field="name",
    external_id_field="dominoId",
    import_timestamp_field="importedAt",
)

STORE_POLICY = EntityImportPolicy(
    kind="stores",
    entity_label="store",
    record_type=StoreRecord,
    natural_key_fields=("name", "companyId"),
    display_field="name",
    create_defaults={"status": "active"},
)

JOB_POLICY = EntityImportPolicy(
    kind="jobs",
    entity_label="job",
    record_type=JobRecord,
    natural_key_fields=("title", "companyId"),
    display_field="title",
    create_defaults={
        "salaryType": "monthly",
        "employmentType": "full-time",
        "experience": "none",
        "education": "none",
    },
)

POLICIES: dict[str, EntityImportPolicy] = {
    policy.kind: policy for policy in (COMPANY_POLICY, STORE_POLICY, JOB_POLICY)
}


def get_policy(kind: str) -> EntityImportPolicy:
    """
    Return the import policy registered for ``kind``.
    """

    normalized = (kind or "").strip().lower()
    try:
        return POLICIES[normalized]
    except KeyError:
        allowed = ", ".join(sorted(POLICIES))
        raise UnknownEntityKindError(
            f"Unknown entity kind '{kind}'. Allowed: {allowed}."
        ) from None
