from __future__ import annotations

import unittest

from app.domain.import_policies import COMPANY_POLICY, JOB_POLICY
from app.mappers.header_localizer import HeaderLocalizer, clean_label


class TestHeaderLocalizer(unittest.TestCase):
    def setUp(self) -> None:
        self.localizer = HeaderLocalizer(COMPANY_POLICY.columns)

    def test_maps_localized_labels_to_canonical_fields(self) -> None:
        headers = self.localizer.localize(["企業名", "住所", "メールアドレス", "DominoID"])

        self.assertEqual(headers, ("name", "address", "email", "dominoId"))

    def test_passes_unknown_labels_through_trimmed(self) -> None:
        headers = self.localizer.localize([" name ", "address", "備考欄"])

        self.assertEqual(headers, ("name", "address", "備考欄"))

    def test_strips_bom_and_whitespace_before_lookup(self) -> None:
        self.assertEqual(self.localizer.localize(["\ufeff 企業名"]), ("name",))
        self.assertEqual(clean_label("\ufeffID "), "ID")

    def test_label_for_returns_localized_label(self) -> None:
        self.assertEqual(self.localizer.label_for("isPublic"), "公開状況")
        self.assertEqual(self.localizer.label_for("unknownField"), "unknownField")

    def test_header_maps_are_per_kind(self) -> None:
        job_localizer = HeaderLocalizer(JOB_POLICY.columns)

        self.assertEqual(job_localizer.localize(["求人タイトル"]), ("title",))
        self.assertEqual(self.localizer.localize(["求人タイトル"]), ("求人タイトル",))
        self.assertEqual(job_localizer.header_map["企業ID"], "companyId")


if __name__ == "__main__":
    unittest.main()
