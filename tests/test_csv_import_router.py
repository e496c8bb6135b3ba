"""
tests/test_csv_import_router.py

HTTP tests for the CSV import endpoints. The database dependency is replaced
with the in-memory store.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_entity_repository
from app.config import CSVImportSettings, get_csv_import_settings
from app.domain.errors import PersistenceError
from app.main import create_app

COMPANY_CSV = (
    "name,address,email,size,isPublic,status\n"
    "Acme Sushi,Tokyo,ops@acme.test,small,true,active\n"
    "Bogus Bar,Osaka,bar@bogus.test,small,true,bogus\n"
)


@pytest.fixture()
def client(company_repository):
    application = create_app(check_environment=False)
    application.dependency_overrides[get_entity_repository] = lambda: company_repository
    application.dependency_overrides[get_csv_import_settings] = lambda: CSVImportSettings(
        max_upload_bytes=1024
    )
    with TestClient(application) as test_client:
        yield test_client


def _upload(client: TestClient, kind: str, body: str, filename: str = "companies.csv"):
    return client.post(
        f"/imports/{kind}",
        files={"file": (filename, body.encode("utf-8"), "text/csv")},
    )


class TestImportEndpoint:
    def test_returns_camel_case_summary(self, client) -> None:
        response = _upload(client, "companies", COMPANY_CSV)

        assert response.status_code == 200
        body = response.json()
        assert body["createdCount"] == 1
        assert body["updatedCount"] == 0
        assert body["totalRows"] == 2
        assert body["errors"] == ["row 3: invalid status"]
        assert body["rowErrors"][0]["rowNumber"] == 3

    def test_missing_required_column_is_400(self, client) -> None:
        response = _upload(client, "companies", "name,address\nAcme Sushi,Tokyo\n")

        assert response.status_code == 400
        assert "ステータス" in response.json()["detail"]["missing_labels"]

    def test_unknown_kind_is_404(self, client) -> None:
        response = _upload(client, "candidates", COMPANY_CSV)

        assert response.status_code == 404

    def test_non_csv_upload_is_rejected(self, client) -> None:
        response = client.post(
            "/imports/companies",
            files={"file": ("companies.json", b"{}", "application/json")},
        )

        assert response.status_code == 400

    def test_oversized_upload_is_413(self, client) -> None:
        response = _upload(client, "companies", COMPANY_CSV + "x" * 2048)

        assert response.status_code == 413

    def test_non_utf8_upload_is_400(self, client) -> None:
        response = client.post(
            "/imports/companies",
            files={"file": ("companies.csv", "企業名\n".encode("shift_jis"), "text/csv")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "CSV must be utf-8-sig encoded."

    def test_write_failure_is_reported_as_row_error(self, client, company_repository, monkeypatch) -> None:
        def refuse(payload):
            raise PersistenceError("connection reset by peer")

        monkeypatch.setattr(company_repository, "create", refuse)

        response = _upload(client, "companies", COMPANY_CSV)

        assert response.status_code == 200
        assert response.json()["errors"] == [
            "row 2: connection reset by peer",
            "row 3: invalid status",
        ]


class TestTemplateEndpoint:
    def test_downloads_template(self, client) -> None:
        response = client.get("/imports/stores/template")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert 'filename="stores_template.csv"' in response.headers["content-disposition"]
        assert response.text.splitlines()[0].startswith("店舗名,")

    def test_unknown_kind_is_404(self, client) -> None:
        assert client.get("/imports/candidates/template").status_code == 404


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}
