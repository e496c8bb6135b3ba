"""
tests/conftest.py

Shared fixtures: an in-memory document store standing in for PostgreSQL.
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import pytest

from app.domain.entity import Entity
from app.domain.errors import EntityNotFoundError, PersistenceError
from app.repositories.entity_repository import EntityRepository, ensure_storable


class InMemoryEntityRepository(EntityRepository):
    """
    Dict-backed repository with the same write semantics as the SQL one.
    """

    def __init__(self, kind: str = "companies", external_id_field: str | None = None) -> None:
        self.kind = kind
        self.external_id_field = external_id_field
        self.documents: dict[str, dict[str, Any]] = {}
        self.writes: list[tuple[str, str, dict[str, Any]]] = []
        self._ids = itertools.count(1)

    def seed(self, data: Mapping[str, Any], entity_id: str | None = None) -> str:
        entity_id = entity_id or f"{self.kind}-{next(self._ids)}"
        self.documents[entity_id] = dict(data)
        return entity_id

    def lookup_by_id(self, entity_id: str) -> Entity | None:
        data = self.documents.get(entity_id)
        return self._entity(entity_id, data) if data is not None else None

    def lookup_by_external_id(self, external_id: str) -> Entity | None:
        if self.external_id_field is None:
            return None
        for entity_id, data in self.documents.items():
            if data.get(self.external_id_field) == external_id:
                return self._entity(entity_id, data)
        return None

    def lookup_by_natural_key(self, fields: Mapping[str, str]) -> Entity | None:
        for entity_id, data in self.documents.items():
            if all(_as_text(data.get(name)) == value for name, value in fields.items()):
                return self._entity(entity_id, data)
        return None

    def create(self, payload: Mapping[str, Any]) -> str:
        ensure_storable(payload)
        entity_id = self.seed(payload)
        self.writes.append(("create", entity_id, dict(payload)))
        return entity_id

    def update(self, entity_id: str, payload: Mapping[str, Any]) -> None:
        ensure_storable(payload)
        if entity_id not in self.documents:
            raise EntityNotFoundError(f"{self.kind} document '{entity_id}' does not exist")
        self.documents[entity_id] = {**self.documents[entity_id], **payload}
        self.writes.append(("update", entity_id, dict(payload)))

    def _entity(self, entity_id: str, data: Mapping[str, Any]) -> Entity:
        return Entity(
            id=entity_id,
            kind=self.kind,
            data=dict(data),
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )


class FlakyEntityRepository(InMemoryEntityRepository):
    """
    Fails every write whose payload carries ``fail_value`` in ``fail_field``.
    """

    def __init__(self, *, fail_field: str, fail_value: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.fail_field = fail_field
        self.fail_value = fail_value

    def create(self, payload: Mapping[str, Any]) -> str:
        if payload.get(self.fail_field) == self.fail_value:
            raise PersistenceError("connection reset by peer")
        return super().create(payload)


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


@pytest.fixture()
def company_repository() -> InMemoryEntityRepository:
    return InMemoryEntityRepository(kind="companies", external_id_field="dominoId")


@pytest.fixture()
def store_repository() -> InMemoryEntityRepository:
    return InMemoryEntityRepository(kind="stores")


@pytest.fixture()
def job_repository() -> InMemoryEntityRepository:
    return InMemoryEntityRepository(kind="jobs")


@pytest.fixture()
def flaky_company_repository() -> FlakyEntityRepository:
    return FlakyEntityRepository(
        fail_field="name",
        fail_value="Broken Ramen",
        kind="companies",
        external_id_field="dominoId",
    )
