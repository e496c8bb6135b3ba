from __future__ import annotations

import unittest

from app.domain.values import UNSET
from app.mappers.payload_sanitizer import contains_unset, sanitize


class TestSanitize(unittest.TestCase):
    def test_removes_unset_at_every_depth(self) -> None:
        payload = {"a": 1, "b": UNSET, "c": {"d": UNSET}, "e": [UNSET, 2]}

        self.assertEqual(sanitize(payload), {"a": 1, "e": [2]})

    def test_drops_lists_that_become_empty(self) -> None:
        self.assertEqual(sanitize({"tags": [UNSET, UNSET], "name": "x"}), {"name": "x"})

    def test_keeps_falsy_values_that_are_not_unset(self) -> None:
        payload = {"isPublic": False, "count": 0, "memo": "", "nothing": None}

        self.assertEqual(sanitize(payload), payload)

    def test_does_not_mutate_input(self) -> None:
        payload = {"a": UNSET, "b": {"c": UNSET, "d": 1}}
        sanitize(payload)

        self.assertIs(payload["a"], UNSET)
        self.assertIs(payload["b"]["c"], UNSET)

    def test_nested_lists_of_mappings(self) -> None:
        payload = {"items": [{"x": UNSET, "y": 1}, UNSET]}

        self.assertEqual(sanitize(payload), {"items": [{"y": 1}]})


class TestContainsUnset(unittest.TestCase):
    def test_detects_nested_unset(self) -> None:
        self.assertTrue(contains_unset({"a": {"b": [1, UNSET]}}))

    def test_clean_payload(self) -> None:
        self.assertFalse(contains_unset({"a": {"b": [1, None, False]}}))

    def test_sanitized_payload_never_contains_unset(self) -> None:
        payload = {"a": UNSET, "b": {"c": [UNSET, {"d": UNSET}]}, "e": 1}

        self.assertFalse(contains_unset(sanitize(payload)))


if __name__ == "__main__":
    unittest.main()
