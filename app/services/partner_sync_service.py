"""
app/services/partner_sync_service.py

Applies company records already fetched from the partner HR system.

Fetching is not done here. Each record is stamped with the import time,
reconciled by partner id (then natural key) and written through the same
sanitizer as CSV imports. Failures are collected per company and never stop
the run.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from app.domain.import_policies import COMPANY_POLICY, EntityImportPolicy
from app.domain.import_result import PartnerSyncSummary
from app.domain.records import build_record
from app.domain.values import UNSET
from app.mappers.payload_sanitizer import sanitize
from app.repositories.entity_repository import EntityRepository
from app.services.reconciler import RecordReconciler

logger = logging.getLogger(__name__)


class PartnerSyncService:
    """
    Creates or updates companies from partner-system records.
    """

    def __init__(self, policy: EntityImportPolicy = COMPANY_POLICY) -> None:
        self._policy = policy

    def apply(
        self,
        records: Sequence[Mapping[str, Any]],
        repository: EntityRepository,
        *,
        imported_at: datetime | None = None,
    ) -> PartnerSyncSummary:
        stamp = (imported_at or datetime.now(tz=timezone.utc)).isoformat()
        reconciler = RecordReconciler(self._policy, repository)

        created = 0
        updated = 0
        errors: list[str] = []

        for values in records:
            name = str(values.get(self._policy.display_field) or "")
            try:
                record = self._to_record(values, stamp)
                resolution = reconciler.reconcile(record)
                payload = sanitize(resolution.payload)
                if resolution.is_create:
                    repository.create(payload)
                    created += 1
                else:
                    repository.update(resolution.entity_id, payload)
                    updated += 1
            except Exception as exc:  # noqa: BLE001
                logger.warning("Partner sync failed company=%r: %s", name, exc)
                errors.append(f"{name}: {exc}")

        logger.info(
            "Partner sync finished created=%s updated=%s failed=%s",
            created,
            updated,
            len(errors),
        )
        return PartnerSyncSummary(
            created=created,
            updated=updated,
            failed=len(errors),
            errors=errors,
        )

    def _to_record(self, values: Mapping[str, Any], stamp: str) -> Any:
        # Partner records never carry a local id.
        cleaned = {
            key: UNSET if value is None else value
            for key, value in values.items()
            if key != self._policy.local_id_field
        }
        if self._policy.import_timestamp_field is not None:
            cleaned[self._policy.import_timestamp_field] = stamp
        return build_record(self._policy.record_type, cleaned)
