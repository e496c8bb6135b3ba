from __future__ import annotations

import unittest

from app.domain.errors import HeaderValidationError
from app.domain.import_policies import COMPANY_POLICY
from app.mappers.header_localizer import HeaderLocalizer
from app.validators.mapping_validator import MappingValidator


class TestMappingValidator(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = MappingValidator(
            required_fields=COMPANY_POLICY.required_fields,
            localizer=HeaderLocalizer(COMPANY_POLICY.columns),
        )

    def test_accepts_headers_with_every_required_field(self) -> None:
        self.validator.validate(
            headers=("name", "address", "email", "size", "isPublic", "status", "memo"),
        )

    def test_raises_with_every_missing_field_by_label(self) -> None:
        with self.assertRaises(HeaderValidationError) as ctx:
            self.validator.validate(headers=("name", "address", "email", "size"))

        self.assertEqual(ctx.exception.missing_fields, ("isPublic", "status"))
        self.assertEqual(ctx.exception.missing_labels, ("公開状況", "ステータス"))
        self.assertIn("公開状況", str(ctx.exception))
        self.assertIn("ステータス", str(ctx.exception))

    def test_error_serializes_for_http_detail(self) -> None:
        with self.assertRaises(HeaderValidationError) as ctx:
            self.validator.validate(headers=())

        detail = ctx.exception.to_dict()
        self.assertEqual(
            detail["missing_fields"],
            ["name", "address", "email", "size", "isPublic", "status"],
        )
        self.assertTrue(detail["message"].startswith("missing required columns:"))


if __name__ == "__main__":
    unittest.main()
