from __future__ import annotations

import unittest
import uuid
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from app.domain.errors import EntityNotFoundError, InvalidDocumentValueError, PersistenceError
from app.domain.values import UNSET
from app.repositories.entity_repository import SQLAlchemyEntityRepository
from db.models.entity_document import EntityDocument


class TestSQLAlchemyEntityRepository(unittest.TestCase):
    def setUp(self) -> None:
        self.session = MagicMock()
        self.repository = SQLAlchemyEntityRepository(
            self.session,
            kind="companies",
            external_id_field="dominoId",
        )

    def test_create_rejects_unset_payload(self) -> None:
        with self.assertRaises(InvalidDocumentValueError):
            self.repository.create({"name": "Acme Sushi", "memo": UNSET})

        self.session.add.assert_not_called()

    def test_create_denormalizes_external_id(self) -> None:
        self.repository.create({"name": "Acme Sushi", "dominoId": " D-1 "})

        document = self.session.add.call_args.args[0]
        self.assertIsInstance(document, EntityDocument)
        self.assertEqual(document.kind, "companies")
        self.assertEqual(document.external_id, "D-1")
        self.session.commit.assert_called_once()

    def test_create_failure_rolls_back(self) -> None:
        self.session.commit.side_effect = OperationalError("INSERT", {}, Exception("server closed"))

        with self.assertRaises(PersistenceError):
            self.repository.create({"name": "Acme Sushi"})

        self.session.rollback.assert_called_once()

    def test_update_merges_into_stored_document(self) -> None:
        document_id = uuid.uuid4()
        stored = EntityDocument(id=document_id, kind="companies", data={"name": "Old", "memo": "keep"})
        self.session.get.return_value = stored

        self.repository.update(str(document_id), {"name": "Acme Sushi"})

        self.assertEqual(stored.data, {"name": "Acme Sushi", "memo": "keep"})
        self.session.commit.assert_called_once()

    def test_update_of_missing_document(self) -> None:
        self.session.get.return_value = None

        with self.assertRaises(EntityNotFoundError):
            self.repository.update(str(uuid.uuid4()), {"name": "Acme Sushi"})

    def test_update_of_other_kind_is_missing(self) -> None:
        self.session.get.return_value = EntityDocument(id=uuid.uuid4(), kind="jobs", data={})

        with self.assertRaises(EntityNotFoundError):
            self.repository.update(str(uuid.uuid4()), {"name": "Acme Sushi"})

    def test_lookup_by_malformed_id_is_none(self) -> None:
        self.assertIsNone(self.repository.lookup_by_id("not-a-uuid"))
        self.session.scalars.assert_not_called()

    def test_lookup_failure_is_persistence_error(self) -> None:
        self.session.scalars.side_effect = OperationalError("SELECT", {}, Exception("timeout"))

        with self.assertRaises(PersistenceError):
            self.repository.lookup_by_external_id("D-1")


if __name__ == "__main__":
    unittest.main()
