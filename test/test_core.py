"""Tests for the node contract, predicates and the merge combinator."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticDSL.core import ArgumentTypeError, extend, is_filter, is_node, is_query, is_span_query
from ElasticDSL.core.util import as_str_list, dedup_preserve_order
from ElasticDSL.filter import TermFilter
from ElasticDSL.query import BoolQuery, SpanTermQuery, TermQuery


class _StubNode:
    """Foreign object honouring the node contract."""

    def _type(self) -> str:
        return "query"

    def to_json(self) -> dict:
        return {"custom": {"x": 1}}


class TestPredicates(unittest.TestCase):
    def test_duck_typed_nodes_are_accepted(self) -> None:
        stub = _StubNode()

        self.assertTrue(is_node(stub))
        self.assertTrue(is_query(stub))
        self.assertEqual(BoolQuery().must(stub).must(), [{"custom": {"x": 1}}])

    def test_non_nodes(self) -> None:
        for value in (None, "term", 3, {"term": {}}, TermQuery):
            with self.subTest(value=value):
                self.assertFalse(is_node(value))
                self.assertFalse(is_query(value))

    def test_category_tags_separate_queries_and_filters(self) -> None:
        self.assertTrue(is_filter(TermFilter("a", 1)))
        self.assertFalse(is_query(TermFilter("a", 1)))
        self.assertFalse(is_filter(TermQuery("a", 1)))

    def test_span_query_detection(self) -> None:
        self.assertTrue(is_span_query(SpanTermQuery("f", "v")))
        self.assertFalse(is_span_query(TermQuery("f", "v")))


class TestHelpers(unittest.TestCase):
    def test_extend_overwrites_left_to_right(self) -> None:
        target = {"a": 1}

        result = extend(target, {"b": 2}, {"a": 3})

        self.assertIs(result, target)
        self.assertEqual(target, {"a": 3, "b": 2})

    def test_as_str_list(self) -> None:
        self.assertEqual(as_str_list("a", "x"), ["a"])
        self.assertEqual(as_str_list(("a", "b"), "x"), ["a", "b"])
        with self.assertRaisesRegex(ArgumentTypeError, "x must be a string"):
            as_str_list(["a", 1], "x")

    def test_dedup_preserve_order(self) -> None:
        self.assertEqual(dedup_preserve_order(["b", "a", "b", "c", "a"]), ["b", "a", "c"])

    def test_to_string_is_compact(self) -> None:
        self.assertEqual(TermQuery("a", 1).to_string(), '{"term":{"a":{"value":1}}}')
        self.assertEqual(str(TermFilter("a", 1)), '{"term":{"a":1}}')


if __name__ == "__main__":
    unittest.main()
