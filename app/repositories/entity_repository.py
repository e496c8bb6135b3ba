"""
app/repositories/entity_repository.py

Document-store contract used by the import pipeline and its PostgreSQL implementation.
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entity import Entity
from app.domain.errors import EntityNotFoundError, InvalidDocumentValueError, PersistenceError
from app.mappers.payload_sanitizer import contains_unset
from db.models.entity_document import EntityDocument

logger = logging.getLogger(__name__)


class EntityRepository(ABC):
    """
    Lookup and write operations for one entity kind.

    Every method raises on transport failure; the import orchestrator turns
    those into row errors.
    """

    @abstractmethod
    def lookup_by_id(self, entity_id: str) -> Entity | None:
        raise NotImplementedError

    @abstractmethod
    def lookup_by_external_id(self, external_id: str) -> Entity | None:
        raise NotImplementedError

    @abstractmethod
    def lookup_by_natural_key(self, fields: Mapping[str, str]) -> Entity | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, payload: Mapping[str, Any]) -> str:
        raise NotImplementedError

    @abstractmethod
    def update(self, entity_id: str, payload: Mapping[str, Any]) -> None:
        raise NotImplementedError


def ensure_storable(payload: Mapping[str, Any]) -> None:
    """
    Reject payloads that still carry the UNSET marker anywhere.
    """

    if contains_unset(payload):
        raise InvalidDocumentValueError("payload contains an unset value")


class SQLAlchemyEntityRepository(EntityRepository):
    """
    Stores entities of one kind as JSONB documents in ``entity_documents``.

    Each write commits on its own; there is no cross-row transaction.
    Updates merge the payload into the stored document.
    """

    def __init__(
        self,
        session: Session,
        *,
        kind: str,
        external_id_field: str | None = None,
    ) -> None:
        self._session = session
        self._kind = kind
        self._external_id_field = external_id_field

    def lookup_by_id(self, entity_id: str) -> Entity | None:
        document_id = _parse_uuid(entity_id)
        if document_id is None:
            return None

        stmt = select(EntityDocument).where(
            EntityDocument.id == document_id,
            EntityDocument.kind == self._kind,
        )
        return self._first(stmt)

    def lookup_by_external_id(self, external_id: str) -> Entity | None:
        stmt = (
            select(EntityDocument)
            .where(
                EntityDocument.kind == self._kind,
                EntityDocument.external_id == external_id,
            )
            .order_by(EntityDocument.created_at.asc())
            .limit(1)
        )
        return self._first(stmt)

    def lookup_by_natural_key(self, fields: Mapping[str, str]) -> Entity | None:
        stmt = select(EntityDocument).where(EntityDocument.kind == self._kind)
        for name, value in fields.items():
            stmt = stmt.where(func.coalesce(EntityDocument.data[name].astext, "") == value)
        stmt = stmt.order_by(EntityDocument.created_at.asc()).limit(1)
        return self._first(stmt)

    def create(self, payload: Mapping[str, Any]) -> str:
        ensure_storable(payload)
        document = EntityDocument(
            kind=self._kind,
            data=dict(payload),
            external_id=self._external_id_of(payload),
        )
        try:
            self._session.add(document)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise PersistenceError(f"failed to create {self._kind} document: {exc}") from exc

        logger.debug("Entity document created kind=%s id=%s", self._kind, document.id)
        return str(document.id)

    def update(self, entity_id: str, payload: Mapping[str, Any]) -> None:
        ensure_storable(payload)
        document_id = _parse_uuid(entity_id)
        try:
            document = (
                self._session.get(EntityDocument, document_id) if document_id is not None else None
            )
            if document is None or document.kind != self._kind:
                raise EntityNotFoundError(f"{self._kind} document '{entity_id}' does not exist")

            document.data = {**(document.data or {}), **payload}
            external_id = self._external_id_of(document.data)
            if external_id is not None:
                document.external_id = external_id
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise PersistenceError(f"failed to update {self._kind} document: {exc}") from exc

        logger.debug("Entity document updated kind=%s id=%s", self._kind, entity_id)

    def _first(self, stmt: Any) -> Entity | None:
        try:
            document = self._session.scalars(stmt).first()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise PersistenceError(f"failed to query {self._kind} documents: {exc}") from exc
        return _to_entity(document) if document is not None else None

    def _external_id_of(self, payload: Mapping[str, Any]) -> str | None:
        if self._external_id_field is None:
            return None
        value = payload.get(self._external_id_field)
        if value is None:
            return None
        text = str(value).strip()
        return text or None


def _parse_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def _to_entity(document: EntityDocument) -> Entity:
    return Entity(
        id=str(document.id),
        kind=document.kind,
        data=dict(document.data or {}),
        created_at=document.created_at,
        updated_at=document.updated_at,
    )
