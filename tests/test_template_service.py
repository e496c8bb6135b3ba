"""
tests/test_template_service.py

Pytest tests for CSV template export.
"""

from __future__ import annotations

import pytest

from app.domain.import_policies import COMPANY_POLICY, POLICIES
from app.mappers.header_localizer import HeaderLocalizer
from app.parsers.csv_tokenizer import tokenize
from app.services.csv_import_service import CSVImportService
from app.services.template_service import generate_template, template_filename


@pytest.mark.parametrize("kind", sorted(POLICIES))
class TestTemplatePerKind:
    def test_has_header_and_one_sample_row(self, kind: str) -> None:
        rows = tokenize(generate_template(POLICIES[kind]))

        assert len(rows) == 2
        assert len(rows[0]) == len(rows[1])

    def test_contains_every_required_column(self, kind: str) -> None:
        policy = POLICIES[kind]
        headers = HeaderLocalizer(policy.columns).localize(tokenize(generate_template(policy))[0])

        assert set(policy.required_fields) <= set(headers)

    def test_omits_local_id_column(self, kind: str) -> None:
        policy = POLICIES[kind]
        headers = HeaderLocalizer(policy.columns).localize(tokenize(generate_template(policy))[0])

        assert policy.local_id_field not in headers

    def test_filename(self, kind: str) -> None:
        assert template_filename(POLICIES[kind]) == f"{kind}_template.csv"


def test_company_template_uses_localized_labels() -> None:
    header = tokenize(generate_template(COMPANY_POLICY))[0]

    assert header[:3] == ["企業名", "住所", "メールアドレス"]


def test_job_template_sample_row_decodes() -> None:
    rows = tokenize(generate_template(POLICIES["jobs"]))
    sample = dict(zip(HeaderLocalizer(POLICIES["jobs"].columns).localize(rows[0]), rows[1]))

    assert sample["workHours"] == "10:00-22:00（シフト制）"
    assert sample["tags"] == "飲食;接客;未経験歓迎"


def test_company_template_imports_cleanly(company_repository) -> None:
    result = CSVImportService(log_row_errors=False).import_csv(
        text=generate_template(COMPANY_POLICY),
        policy=COMPANY_POLICY,
        repository=company_repository,
    )

    assert (result.created_count, result.errors) == (1, [])
