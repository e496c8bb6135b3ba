"""
app/services/reconciler.py

Create-or-update decision for one candidate record.

Match priority:
    1. local id          - must resolve, a miss fails the row
    2. external id       - partner HR system identifier, when the kind has one
    3. natural key       - exact match on the policy's key fields
Nothing matched means the record is created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from app.domain.entity import Entity
from app.domain.errors import EntityNotFoundError
from app.domain.import_policies import EntityImportPolicy
from app.domain.values import UNSET
from app.repositories.entity_repository import EntityRepository

logger = logging.getLogger(__name__)

CREATE = "create"
UPDATE = "update"

STRATEGY_LOCAL_ID = "local_id"
STRATEGY_EXTERNAL_ID = "external_id"
STRATEGY_NATURAL_KEY = "natural_key"
STRATEGY_NEW = "new"


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of reconciling one record. ``payload`` may still contain UNSET.
    """

    action: str
    entity_id: str | None
    payload: dict[str, Any] = field(default_factory=dict)
    strategy: str = STRATEGY_NEW
    display_name: str = ""

    @property
    def is_create(self) -> bool:
        return self.action == CREATE


class RecordReconciler:
    """
    Resolves candidate records against the store for one entity kind.

    Lookup failures are not caught here.
    """

    def __init__(self, policy: EntityImportPolicy, repository: EntityRepository) -> None:
        self._policy = policy
        self._repository = repository

    def reconcile(self, record: Any) -> Resolution:
        policy = self._policy
        payload = policy.payload_of(record)

        local_id = policy.local_id_of(record)
        if local_id is not None:
            existing = self._repository.lookup_by_id(local_id)
            if existing is None:
                raise EntityNotFoundError(f"{policy.entity_label} id '{local_id}' does not exist")
            return self._update(existing, payload, STRATEGY_LOCAL_ID, carry_forward=False)

        external_id = policy.external_id_of(record)
        if external_id is not None:
            existing = self._repository.lookup_by_external_id(external_id)
            if existing is not None:
                return self._update(existing, payload, STRATEGY_EXTERNAL_ID, carry_forward=True)

        existing = self._repository.lookup_by_natural_key(policy.natural_key_of(record))
        if existing is not None:
            return self._update(existing, payload, STRATEGY_NATURAL_KEY, carry_forward=True)

        return self._create(payload)

    def _update(
        self,
        existing: Entity,
        payload: dict[str, Any],
        strategy: str,
        *,
        carry_forward: bool,
    ) -> Resolution:
        if carry_forward:
            for name in self._policy.carried_fields:
                if payload.get(name, UNSET) is UNSET and existing.get(name) is not None:
                    payload[name] = existing.get(name)

        display_name = self._policy.display_name_of(existing.data)
        logger.info(
            "Matched existing %s strategy=%s id=%s name=%r",
            self._policy.entity_label,
            strategy,
            existing.id,
            display_name,
        )
        return Resolution(
            action=UPDATE,
            entity_id=existing.id,
            payload=payload,
            strategy=strategy,
            display_name=display_name,
        )

    def _create(self, payload: dict[str, Any]) -> Resolution:
        for name, default in self._policy.create_defaults.items():
            if payload.get(name, UNSET) is UNSET:
                payload[name] = default

        display_name = self._policy.display_name_of(payload)
        logger.info("No match for %s, creating name=%r", self._policy.entity_label, display_name)
        return Resolution(
            action=CREATE,
            entity_id=None,
            payload=payload,
            strategy=STRATEGY_NEW,
            display_name=display_name,
        )
